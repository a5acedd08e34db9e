"""
Interaction layer: turns raw chat messages into command calls.

Sits between the chat transport and the resolution pipeline.
"""
from .message_normalizer import MessageNormalizer
from .response_sink import ResponseSink
from .command_registry import CommandContext, CommandHandler, CommandRegistry
from .admin_commands import PrefixCommands
from .console_sink import ConsoleSink

__all__ = [
    "MessageNormalizer",
    "ResponseSink",
    "CommandContext",
    "CommandHandler",
    "CommandRegistry",
    "PrefixCommands",
    "ConsoleSink",
]
