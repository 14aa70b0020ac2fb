import pytest

from seimei.mora import count


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("サル", 2),
        ("カッパ", 3),
        ("チョコレート", 5),
        ("ガッコウシンブン", 8),
        ("ガッキュウシンブン", 8),
        ("カンソク", 4),
        ("カーサン", 4),
        ("ニーサン", 4),
    ],
)
def test_count(text, expected):
    assert count(text) == expected