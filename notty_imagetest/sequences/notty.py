"""Base64 notty image sequences.

Notty commands are APC strings. Arguments are hex, separated by ``;``, and
each attachment is base64 text introduced by ``#``::

    ESC _ [ 14;w;h;pos # b64(mime) # b64(data) ST

ST is the C1 string terminator U+009C. The terminal decodes its input as
UTF-8, so it is written as the two bytes ``C2 9C``.
"""

import base64
import binascii
import enum
import re
from typing import ClassVar

from ..exceptions import SequenceFormatError
from ..utilities.types import ImagePayload
from .base import ESC, EscapeSequence, Frame, ProtocolName, encode_argument, is_argument

HEADER = f"{ESC}_["
TERMINATOR = "\u009c"

PUT_IMAGE = 0x14
PUT_IMAGE_AT = 0x15

_BASE64_PATTERN = re.compile(r"[0-9A-Za-z+/=]*")


class MediaPosition(enum.IntEnum):
    """How the terminal fits an image into its cell area."""

    DISPLAY = 1
    FILL = 2
    FIT = 3
    STRETCH = 4
    TILE = 5


class NottyImageSequence(EscapeSequence):
    """Put an image at the cursor position."""

    protocol: ClassVar[ProtocolName] = "notty"
    command: ClassVar[int] = PUT_IMAGE

    width: int
    height: int
    position: MediaPosition | None = None

    def arguments(self) -> list[int | tuple[int, ...]]:
        args: list[int | tuple[int, ...]] = [self.command, self.width, self.height]
        if self.position is not None:
            args.append(int(self.position))
        return args

    def args(self) -> str:
        return ";".join(encode_argument(arg) for arg in self.arguments())

    def render(self, payload: ImagePayload) -> bytes:
        sequence = (
            f"{HEADER}{self.args()}#{payload.b64_mime}#{payload.b64_data}{TERMINATOR}"
        )
        return sequence.encode("utf-8")


class NottyImageAtSequence(NottyImageSequence):
    """Put an image with its top left corner at fixed screen coordinates."""

    command: ClassVar[int] = PUT_IMAGE_AT

    coords: tuple[int, int] = (0, 0)

    def arguments(self) -> list[int | tuple[int, ...]]:
        args = super().arguments()
        args.insert(1, self.coords)
        return args


def _error(reason: str) -> SequenceFormatError:
    return SequenceFormatError(protocol="notty", reason=reason)


def parse_notty(data: bytes) -> Frame:
    """Decode a captured notty sequence.

    A single trailing newline, as written by the emitter, is accepted.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SequenceFormatError(
            protocol="notty", reason="not valid UTF-8", cause=e
        ) from e

    if text.endswith("\n"):
        text = text[:-1]
    if not text.startswith(HEADER):
        raise _error("missing ESC _ [ header")
    if not text.endswith(TERMINATOR):
        raise _error("missing string terminator")

    body = text[len(HEADER) : -len(TERMINATOR)]
    args_text, *encoded = body.split("#")

    args = args_text.split(";")
    if not all(is_argument(arg) for arg in args):
        raise _error(f"invalid arguments: {args_text!r}")

    attachments: list[bytes] = []
    for chunk in encoded:
        if not _BASE64_PATTERN.fullmatch(chunk):
            raise _error("attachment contains non-base64 characters")
        try:
            attachments.append(base64.b64decode(chunk, validate=True))
        except binascii.Error as e:
            raise SequenceFormatError(
                protocol="notty", reason="invalid base64 attachment", cause=e
            ) from e

    return Frame(protocol="notty", args=args, attachments=attachments)
