"""Utility functions and helpers for notty-imagetest."""

from .logging import configure_logging, get_logger
from .types import ImagePayload, encode_hex_length, parse_hex_length

__all__ = [
    "configure_logging",
    "get_logger",
    "ImagePayload",
    "encode_hex_length",
    "parse_hex_length",
]
