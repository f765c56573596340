"""Escape-sequence fixtures for notty-imagetest."""

from .base import EscapeSequence, Frame, SequenceMetadata, encode_argument
from .natty import NattySequence, parse_natty
from .notty import (
    MediaPosition,
    NottyImageAtSequence,
    NottyImageSequence,
    parse_notty,
)
from .registry import SequenceRegistry, default_fixtures, registry

__all__ = [
    "EscapeSequence",
    "Frame",
    "SequenceMetadata",
    "encode_argument",
    "NattySequence",
    "parse_natty",
    "MediaPosition",
    "NottyImageAtSequence",
    "NottyImageSequence",
    "parse_notty",
    "SequenceRegistry",
    "default_fixtures",
    "registry",
]
