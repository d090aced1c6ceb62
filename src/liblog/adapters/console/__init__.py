from .console_provider import ConsoleLogProvider
from .writer import ConsoleWriter

__all__ = [
    "ConsoleLogProvider",
    "ConsoleWriter",
]
