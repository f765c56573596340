"""Tests for the length-prefixed natty sequence."""

import pytest

from notty_imagetest.exceptions import SequenceFormatError
from notty_imagetest.sequences.natty import NattySequence, parse_natty
from notty_imagetest.utilities.types import ImagePayload

PREFIX = "\x1b{4;36;12{9;image/png{"


@pytest.fixture
def sequence():
    return NattySequence()


@pytest.fixture
def payload():
    return ImagePayload(data=b"\x01\x02\x03\x04")


def test_prefix(sequence):
    """Test the default prefix matches the known literal."""
    assert sequence.prefix() == PREFIX
    assert len(sequence.prefix()) == 22


def test_prefix_other_mime(sequence):
    """Test the MIME attachment carries its own length."""
    assert sequence.prefix("image/jpeg") == "\x1b{4;36;12{a;image/jpeg{"


def test_render(sequence, payload):
    """Test raw bytes are embedded after the hex length."""
    assert sequence.render(payload) == PREFIX.encode() + b"4;\x01\x02\x03\x04}"


def test_render_empty(sequence):
    """Test an empty image still produces a well-formed sequence."""
    assert sequence.render(ImagePayload(data=b"")) == PREFIX.encode() + b"0;}"


def test_diagnostic(sequence, payload):
    """Test the diagnostic line for a four byte image."""
    assert sequence.diagnostic(payload) == "29 = 4 + 22 + 1 + 2"


@pytest.mark.parametrize("size", [0, 1, 15, 16, 255, 256, 5000])
def test_diagnostic_is_consistent(sequence, size):
    """Test the left hand total equals the right hand sum."""
    line = sequence.diagnostic(ImagePayload(data=b"x" * size))
    total, parts = line.split(" = ")
    assert int(total) == sum(int(part) for part in parts.split(" + "))
    assert int(total) == len(sequence.render(ImagePayload(data=b"x" * size)))


def test_output_inside_natty(sequence, payload):
    """Test the raw sequence is printed when TERM matches."""
    assert sequence.output(payload, term="natty") == sequence.render(payload)


@pytest.mark.parametrize("term", [None, "", "xterm-256color", "Natty"])
def test_output_outside_natty(sequence, payload, term):
    """Test any other terminal gets the diagnostic line."""
    assert sequence.output(payload, term=term) == b"29 = 4 + 22 + 1 + 2"


def test_output_expected_term_override(sequence, payload):
    """Test the expected terminal name can be changed per call."""
    assert sequence.output(payload, term="notty", expected_term="notty") == (
        sequence.render(payload)
    )
    assert sequence.output(payload, term="natty", expected_term="notty") == (
        b"29 = 4 + 22 + 1 + 2"
    )


class TestParseNatty:
    """Test decoding captured natty sequences."""

    def test_parse(self, sequence):
        """Test arguments and both attachments are recovered."""
        data = b"\x89PNG}{;\n\x00"
        frame = parse_natty(sequence.render(ImagePayload(data=data)) + b"\n")
        assert frame.protocol == "natty"
        assert frame.args == ["4", "36", "12"]
        assert frame.command == 4
        assert frame.attachments == [b"image/png", data]

    def test_parse_empty(self, sequence):
        """Test an empty payload decodes to an empty attachment."""
        frame = parse_natty(sequence.render(ImagePayload(data=b"")))
        assert frame.attachments == [b"image/png", b""]

    @pytest.mark.parametrize(
        "data,reason",
        [
            (b"hello", "missing ESC { header"),
            (b"\x1b{4;36;12", "unterminated argument list"),
            (b"\x1b{4;zz{9;image/png}", "invalid arguments"),
            (b"\x1b{4{9image/png}", "attachment without length"),
            (b"\x1b{4{x;image/png}", "invalid attachment length"),
            (b"\x1b{4{ff;image/png}", "truncated attachment"),
            (b"\x1b{4{9;image/png}junk", "trailing bytes after terminator"),
            (b"\x1b{4{9;image/png!", "unexpected delimiter"),
        ],
    )
    def test_parse_invalid(self, data, reason):
        """Test malformed captures are rejected with a reason."""
        with pytest.raises(SequenceFormatError) as exc_info:
            parse_natty(data)
        assert reason in exc_info.value.details["reason"]
