"""
Mod Agent Service - mod portal lookups for chat.
"""
from .app import ModAgentApp
from .config import ModAgentConfig
from .config_loader import load_config_from_env

__all__ = ["ModAgentApp", "ModAgentConfig", "load_config_from_env"]
