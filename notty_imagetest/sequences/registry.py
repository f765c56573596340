"""Fixture registry."""

import logging

from ..exceptions import UnknownFixtureError
from .base import EscapeSequence, SequenceMetadata
from .natty import NattySequence
from .notty import MediaPosition, NottyImageAtSequence, NottyImageSequence

logger = logging.getLogger(__name__)


class SequenceRegistry:
    """Central registry of named escape-sequence fixtures."""

    def __init__(self) -> None:
        self._fixtures: dict[str, EscapeSequence] = {}

    def register(self, fixture: EscapeSequence) -> None:
        """Register a fixture under its name."""
        if fixture.name in self._fixtures:
            logger.warning(f"Fixture already registered: {fixture.name}")
            return

        self._fixtures[fixture.name] = fixture
        logger.debug(f"Registered fixture: {fixture.name} ({fixture.protocol})")

    def unregister(self, name: str) -> None:
        """Remove a fixture, if present."""
        if self._fixtures.pop(name, None) is not None:
            logger.debug(f"Unregistered fixture: {name}")

    def get(self, name: str) -> EscapeSequence:
        """Get a fixture by name."""
        try:
            return self._fixtures[name]
        except KeyError:
            raise UnknownFixtureError(name) from None

    def list_fixtures(self) -> list[SequenceMetadata]:
        """List all registered fixtures in registration order."""
        return [fixture.metadata for fixture in self._fixtures.values()]

    def __contains__(self, name: str) -> bool:
        return name in self._fixtures


def default_fixtures() -> list[EscapeSequence]:
    """The known image fixtures. Each one is independent of the others."""
    return [
        NattySequence(
            description="Raw length-prefixed PNG, diagnostic line outside natty",
        ),
        NottyImageSequence(
            name="notty-32x8",
            description="Base64 image, 0x32 by 0x8 cells, stretched",
            width=0x32,
            height=0x8,
            position=MediaPosition.STRETCH,
        ),
        NottyImageSequence(
            name="notty-80x16",
            description="Base64 image, 0x80 by 0x16 cells, stretched",
            width=0x80,
            height=0x16,
            position=MediaPosition.STRETCH,
        ),
        NottyImageSequence(
            name="notty-12x8",
            description="Base64 image, 0x12 by 0x8 cells, default position",
            width=0x12,
            height=0x8,
        ),
        NottyImageAtSequence(
            name="notty-at",
            description="Base64 image placed at the top left corner",
            coords=(0, 0),
            width=0x32,
            height=0x8,
            position=MediaPosition.STRETCH,
        ),
    ]


# Global registry instance
registry = SequenceRegistry()
for _fixture in default_fixtures():
    registry.register(_fixture)
