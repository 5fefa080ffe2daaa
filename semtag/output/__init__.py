"""Output layer: console abstraction with Rich and recording backends."""

from .console import ConsoleProtocol, MockConsole, OutputRecord, RichConsole, Style

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
]
