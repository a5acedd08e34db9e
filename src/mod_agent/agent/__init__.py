from .output_formatter import ModOutputFormatter

__all__ = ["ModOutputFormatter"]
