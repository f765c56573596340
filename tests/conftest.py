"""Shared fixtures for notty-imagetest tests."""

import pytest

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def tiny_image(tmp_path):
    """A four byte file: 01 02 03 04."""
    path = tmp_path / "tiny.png"
    path.write_bytes(b"\x01\x02\x03\x04")
    return path


@pytest.fixture
def empty_image(tmp_path):
    """A zero byte file."""
    path = tmp_path / "empty.png"
    path.write_bytes(b"")
    return path


@pytest.fixture
def png_image(tmp_path):
    """A file with a PNG signature and bytes that look like frame delimiters."""
    path = tmp_path / "test.png"
    path.write_bytes(PNG_SIGNATURE + b"}{;#\x9c\x00" * 40)
    return path
