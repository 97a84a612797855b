import pytest

from sunder.utils import clamp, format_bytes, format_percent


@pytest.mark.parametrize("num,text", [
    (0, "0 B"),
    (1, "1 B"),
    (1023, "1023 B"),
    (1024, "1.00 KB"),
    (1536, "1.50 KB"),
    (1024 ** 2, "1.00 MB"),
    (150 * 1024 ** 2, "150 MB"),
    (3 * 1024 ** 3 // 2, "1.50 GB"),
    (1024 ** 4, "1.00 TB"),
    (2048 * 1024 ** 4, "2048 TB"),
])
def test_format_bytes(num, text):
    assert format_bytes(num) == text


def test_format_bytes_negative_passthrough():
    assert format_bytes(-5) == "-5"


def test_format_percent():
    assert format_percent(25.0) == " 25.0%"
    assert format_percent(100.0) == "100.0%"
    assert format_percent(150.0) == "100.0%"


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2
