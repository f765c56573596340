"""notty-imagetest - inline image escape sequences for terminal testing."""

__version__ = "0.1.0"

from .emitter import Emitter
from .cli import main as cli_main

__all__ = ["Emitter", "cli_main"]
