"""Length-prefixed natty image sequence.

A natty frame embeds its attachments raw, each one preceded by its length
in hex::

    ESC { cmd;w;h { len(mime);mime { len(data);data }

With the default arguments and ``image/png`` the prefix is the literal
``"\\x1b{4;36;12{9;image/png{"``.
"""

from typing import ClassVar

from ..exceptions import SequenceFormatError
from ..utilities.logging import get_logger
from ..utilities.types import (
    DEFAULT_MIME_TYPE,
    ImagePayload,
    encode_hex_length,
    parse_hex_length,
)
from .base import ESC, EscapeSequence, Frame, ProtocolName, encode_argument, is_argument

logger = get_logger(__name__)

# The ";" between the length and the data, and the closing "}".
FRAME_OVERHEAD = 2

EXPECTED_TERM = "natty"


class NattySequence(EscapeSequence):
    """Raw-bytes image sequence, printed only inside a natty terminal."""

    protocol: ClassVar[ProtocolName] = "natty"

    name: str = "natty"
    command: int = 0x4
    width: int = 0x36
    height: int = 0x12
    expected_term: str = EXPECTED_TERM

    def args(self) -> str:
        return ";".join(
            encode_argument(v) for v in (self.command, self.width, self.height)
        )

    def prefix(self, mime_type: str = DEFAULT_MIME_TYPE) -> str:
        """Everything up to the data length: header, arguments and MIME attachment."""
        mime_length = encode_hex_length(len(mime_type.encode("utf-8")))
        return f"{ESC}{{{self.args()}{{{mime_length};{mime_type}{{"

    def render(self, payload: ImagePayload) -> bytes:
        return (
            self.prefix(payload.mime_type).encode("utf-8")
            + payload.hex_length.encode("ascii")
            + b";"
            + payload.data
            + b"}"
        )

    def diagnostic(self, payload: ImagePayload) -> str:
        """Describe the sequence length as a sum of its parts instead of printing it."""
        total = len(self.render(payload))
        prefix_length = len(self.prefix(payload.mime_type).encode("utf-8"))
        return (
            f"{total} = {payload.length} + {prefix_length} + "
            f"{len(payload.hex_length)} + {FRAME_OVERHEAD}"
        )

    def output(
        self,
        payload: ImagePayload,
        term: str | None = None,
        expected_term: str | None = None,
    ) -> bytes:
        expected = expected_term or self.expected_term
        if term == expected:
            return self.render(payload)

        logger.info(f"TERM is {term!r}, not {expected!r}: printing length check")
        return self.diagnostic(payload).encode("ascii")


def _error(reason: str) -> SequenceFormatError:
    return SequenceFormatError(protocol="natty", reason=reason)


def parse_natty(data: bytes) -> Frame:
    """Decode a captured natty sequence.

    A single trailing newline, as written by the emitter, is accepted.
    """
    if data.endswith(b"\n"):
        data = data[:-1]

    header = ESC.encode("ascii") + b"{"
    if not data.startswith(header):
        raise _error("missing ESC { header")

    pos = len(header)
    args_end = data.find(b"{", pos)
    if args_end < 0:
        raise _error("unterminated argument list")

    try:
        args = data[pos:args_end].decode("ascii").split(";")
    except UnicodeDecodeError as e:
        raise SequenceFormatError(
            protocol="natty", reason="non-ascii arguments", cause=e
        ) from e
    if not all(is_argument(arg) for arg in args):
        raise _error(f"invalid arguments: {';'.join(args)!r}")

    attachments: list[bytes] = []
    pos = args_end + 1
    while True:
        semicolon = data.find(b";", pos)
        if semicolon < 0:
            raise _error("attachment without length")
        try:
            length = parse_hex_length(data[pos:semicolon].decode("ascii"))
        except (UnicodeDecodeError, ValueError) as e:
            raise SequenceFormatError(
                protocol="natty", reason="invalid attachment length", cause=e
            ) from e

        start = semicolon + 1
        end = start + length
        if end >= len(data):
            raise _error("truncated attachment")
        attachments.append(data[start:end])

        delimiter = data[end : end + 1]
        if delimiter == b"}":
            if end + 1 != len(data):
                raise _error("trailing bytes after terminator")
            break
        if delimiter != b"{":
            raise _error(f"unexpected delimiter {delimiter!r}")
        pos = end + 1

    return Frame(protocol="natty", args=args, attachments=attachments)
