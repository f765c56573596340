"""Type definitions and utilities for notty-imagetest."""

import base64
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import ImageReadError
from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_MIME_TYPE = "image/png"

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")


def encode_hex_length(length: int) -> str:
    """Render a byte count as lowercase hexadecimal text."""
    if length < 0:
        raise ValueError(f"Length cannot be negative: {length}")
    return format(length, "x")


def parse_hex_length(text: str) -> int:
    """Parse a hexadecimal length written by `encode_hex_length`.

    Unlike ``int(text, 16)`` this rejects signs, whitespace, underscores
    and ``0x`` prefixes.
    """
    if not _HEX_PATTERN.fullmatch(text):
        raise ValueError(f"Invalid hexadecimal length: {text!r}")
    return int(text, 16)


class ImagePayload(BaseModel):
    """Represents an image file's bytes with metadata."""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(description="Raw image data")
    mime_type: str = Field(
        default=DEFAULT_MIME_TYPE, description="MIME type of the image"
    )
    path: Path | None = Field(default=None, description="File the data came from")

    @classmethod
    def from_file(
        cls, path: Path | str, mime_type: str = DEFAULT_MIME_TYPE
    ) -> "ImagePayload":
        """Read a whole image file into memory."""
        path = Path(path)
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ImageReadError(path=path, cause=e) from e

        logger.debug(f"Read {len(data)} bytes from {path}")
        return cls(data=data, mime_type=mime_type, path=path)

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def hex_length(self) -> str:
        return encode_hex_length(self.length)

    @property
    def b64_data(self) -> str:
        """Base64 of the image bytes, unwrapped and padded."""
        return base64.b64encode(self.data).decode("ascii")

    @property
    def b64_mime(self) -> str:
        """Base64 of the MIME type literal."""
        return base64.b64encode(self.mime_type.encode("utf-8")).decode("ascii")
