"""Test module for sigpad.document

The tests are run using pytest.
"""

import base64
import logging

import pytest

from sigpad.errors import InvalidSvgError
from sigpad.document import SignatureDocument

# An SVG as written by earlier versions of the pad
LEGACY_SVG = (
    "<?xml version='1.0' encoding='utf-8' ?> "
    '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" esign_new="1" fill="none" '
    'stroke="black" stroke-linecap="round" stroke-width="4" viewBox="0 0 320 120">'
    '<path d="M 10 10 C 1 2, 3 4, 5 6 S 7 8, 9 10 "/>'
    '<path d="M 50 50 L 51 52 "/>'
    "</svg>"
)


def make_document():
    """A document with two strokes."""
    document = SignatureDocument(300, 100, 2)
    document.add_path("M 0 0 L 10 10")
    document.add_path("M 20 20 C 21 22, 23 24, 25 26")
    return document


def test_empty_document():
    """A new document has no strokes."""
    document = SignatureDocument(200, 200)
    assert document.is_empty
    assert document.paths == ()
    assert document.line_width == 3


def test_to_string_attributes():
    """The SVG carries the stroke style and the viewbox of the pad."""
    svg = make_document().to_string()
    assert svg.startswith("<?xml")
    assert "\n" not in svg
    assert 'fill="none"' in svg
    assert 'stroke="black"' in svg
    assert 'stroke-linecap="round"' in svg
    assert 'stroke-width="2"' in svg
    assert 'viewBox="0 0 300 100"' in svg
    assert ' width="' not in svg
    assert ' height="' not in svg
    assert 'd="M 0 0 L 10 10"' in svg


def test_round_trip():
    """A written document loads with the same size, stroke width and paths."""
    document = make_document()
    loaded = SignatureDocument.from_string(document.to_string())
    assert (loaded.width, loaded.height) == (300, 100)
    assert loaded.line_width == 2
    assert loaded.paths == document.paths


def test_data_url_round_trip():
    """Base64 data URLs are decoded on load."""
    document = make_document()
    data_url = document.to_data_url()
    assert data_url.startswith("data:image/svg+xml;base64,")
    assert SignatureDocument.from_string(data_url).paths == document.paths


def test_plain_base64():
    """Base64 without the data URL prefix is accepted as well."""
    encoded = base64.b64encode(LEGACY_SVG.encode("utf-8")).decode("ascii")
    assert len(SignatureDocument.from_string(encoded).paths) == 2


def test_legacy_document():
    """Size, stroke width and paths are read from documents of earlier versions."""
    loaded = SignatureDocument.from_string(LEGACY_SVG)
    assert (loaded.width, loaded.height) == (320, 120)
    assert loaded.line_width == 4
    assert loaded.paths == ("M 10 10 C 1 2, 3 4, 5 6 S 7 8, 9 10", "M 50 50 L 51 52")


def test_text_document_is_empty(caplog):
    """SVG generated from text is not a drawing."""
    svg = '<svg viewBox="0 0 100 50"><text x="0" y="10">John Doe</text></svg>'
    with caplog.at_level(logging.WARNING, logger="sigpad.document"):
        loaded = SignatureDocument.from_string(svg)
    assert loaded.is_empty
    assert (loaded.width, loaded.height) == (100, 50)
    assert "text" in caplog.text


def test_size_defaults_without_viewbox():
    """Without a viewBox the given size is used."""
    loaded = SignatureDocument.from_string('<svg><path d="M 1 1 L 2 2"/></svg>', width=80, height=60)
    assert (loaded.width, loaded.height) == (80, 60)
    assert loaded.line_width == 3


def test_no_size():
    """A document without viewBox needs a given size."""
    with pytest.raises(InvalidSvgError):
        SignatureDocument.from_string('<svg><path d="M 1 1 L 2 2"/></svg>')


@pytest.mark.parametrize("data", ["", "   ", "not base64!!", "data:image/svg+xml;base64,%%%"])
def test_invalid_data(data):
    """Empty data and broken base64 are rejected."""
    with pytest.raises(InvalidSvgError):
        SignatureDocument.from_string(data, width=10, height=10)


def test_clear():
    """clear() removes all paths."""
    document = make_document()
    document.clear()
    assert document.is_empty
