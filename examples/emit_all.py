"""Example: print every notty fixture for one image, one per line."""

import sys

from notty_imagetest.emitter import Emitter
from notty_imagetest.sequences import registry
from notty_imagetest.settings import Settings
from notty_imagetest.utilities.logging import configure_logging, get_logger

configure_logging("INFO")
logger = get_logger(__name__)


if __name__ == "__main__":
    image = sys.argv[1] if len(sys.argv) > 1 else "test.png"
    emitter = Emitter(Settings(image_path=image))

    for metadata in registry.list_fixtures():
        if metadata.protocol != "notty":
            continue
        logger.info(f"Fixture {metadata.name}: {metadata.description}")
        emitter.emit(metadata.name)
