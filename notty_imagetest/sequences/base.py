"""Base classes for escape-sequence fixtures."""

import abc
import re
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

from ..utilities.types import ImagePayload

ESC = "\x1b"

ProtocolName = Literal["natty", "notty"]

_ARGUMENT_PATTERN = re.compile(r"[0-9a-fA-F]+(\.[0-9a-fA-F]+)*")


def encode_argument(value: int | tuple[int, ...]) -> str:
    """Encode one numeric argument as lowercase hex.

    Compound arguments (coordinates, for instance) are joined with ``.``.
    """
    if isinstance(value, tuple):
        return ".".join(encode_argument(v) for v in value)
    if value < 0:
        raise ValueError(f"Arguments cannot be negative: {value}")
    return format(value, "x")


def is_argument(token: str) -> bool:
    """Check that a token is a valid hex argument as written by `encode_argument`."""
    return _ARGUMENT_PATTERN.fullmatch(token) is not None


class SequenceMetadata(BaseModel):
    """Descriptive information about a fixture."""

    name: str
    description: str | None = None
    protocol: ProtocolName


class Frame(BaseModel):
    """A decoded escape sequence."""

    protocol: ProtocolName
    args: list[str] = Field(default_factory=list)
    attachments: list[bytes] = Field(default_factory=list)

    @property
    def command(self) -> int | None:
        """The command code, i.e. the first argument."""
        if not self.args:
            return None
        return int(self.args[0], 16)


class EscapeSequence(BaseModel, abc.ABC):
    """Base class for all escape-sequence fixtures."""

    model_config = ConfigDict(frozen=True)

    protocol: ClassVar[ProtocolName]

    name: str
    description: str | None = None

    @property
    def metadata(self) -> SequenceMetadata:
        return SequenceMetadata(
            name=self.name, description=self.description, protocol=self.protocol
        )

    @abc.abstractmethod
    def render(self, payload: ImagePayload) -> bytes:
        """Build the complete escape sequence for a payload."""
        pass

    def output(
        self,
        payload: ImagePayload,
        term: str | None = None,
        expected_term: str | None = None,
    ) -> bytes:
        """Bytes to print for a payload when running under ``term``.

        The default ignores the terminal and always prints the sequence.
        """
        return self.render(payload)
