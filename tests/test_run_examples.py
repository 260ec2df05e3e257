"""Test module to run examples from the examples.sigpad package

The tests are run using pytest.
"""

import pytest  # pylint: disable=unused-import

from examples.sigpad import draw_signature_svg


def test_examples_draw_signature_svg(capsys):
    """Test function for draw_signature_svg example"""
    draw_signature_svg.main()
    output = capsys.readouterr().out
    assert "STREAMING" in output
    assert "BATCH" in output
    assert output.count("<svg") == 2
