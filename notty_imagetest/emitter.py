"""Escape-sequence emitter: read an image, print one fixture's sequence."""

import sys
from pathlib import Path
from typing import BinaryIO

from .exceptions import ImageReadError, SequenceFormatError
from .sequences.base import ESC, Frame
from .sequences.natty import parse_natty
from .sequences.notty import HEADER, parse_notty
from .sequences.registry import SequenceRegistry, registry as default_registry
from .settings import Settings
from .utilities.logging import get_logger
from .utilities.types import ImagePayload

logger = get_logger(__name__)


class Emitter:
    """Builds a fixture's output line and writes it to a binary stream."""

    def __init__(
        self,
        settings: Settings | None = None,
        stream: BinaryIO | None = None,
        registry: SequenceRegistry | None = None,
    ):
        self.settings = settings or Settings()
        self._stream = stream
        self.registry = registry or default_registry

    @property
    def stream(self) -> BinaryIO:
        # Looked up on use so a replaced sys.stdout is honoured.
        if self._stream is not None:
            return self._stream
        return sys.stdout.buffer

    def build(
        self,
        fixture_name: str | None = None,
        image_path: Path | str | None = None,
        mime_type: str | None = None,
    ) -> bytes:
        """Build the complete output line, trailing newline included."""
        fixture = self.registry.get(fixture_name or self.settings.fixture)
        payload = ImagePayload.from_file(
            image_path or self.settings.image_path,
            mime_type or self.settings.mime_type,
        )

        output = fixture.output(
            payload,
            term=self.settings.term,
            expected_term=self.settings.expected_term,
        )
        return output + b"\n"

    def emit(
        self,
        fixture_name: str | None = None,
        image_path: Path | str | None = None,
        mime_type: str | None = None,
    ) -> int:
        """Write one fixture's output line. Returns the number of bytes written."""
        line = self.build(fixture_name, image_path, mime_type)

        stream = self.stream
        stream.write(line)
        stream.flush()

        logger.debug(f"Wrote {len(line)} bytes")
        return len(line)


def parse_frame(data: bytes) -> Frame:
    """Decode a captured sequence of either dialect."""
    if data.startswith(HEADER.encode("utf-8")):
        return parse_notty(data)
    if data.startswith(ESC.encode("ascii") + b"{"):
        return parse_natty(data)
    raise SequenceFormatError(reason="not a natty or notty image sequence")


def inspect_capture(path: Path | str) -> Frame:
    """Read a file holding captured emitter output and decode it."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ImageReadError("Failed to read capture file", path=path, cause=e) from e
    return parse_frame(data)
