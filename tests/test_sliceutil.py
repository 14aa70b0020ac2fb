import pytest

from seimei.sliceutil import cartesian, flatten


@pytest.mark.parametrize(
    "lists, expected",
    [
        ([], []),
        ([["a"], [], ["1"]], []),
        ([["a"], ["1"]], [["a", "1"]]),
        (
            [["a", "b"], ["1", "2", "3"]],
            [
                ["a", "1"],
                ["a", "2"],
                ["a", "3"],
                ["b", "1"],
                ["b", "2"],
                ["b", "3"],
            ],
        ),
    ],
)
def test_cartesian(lists, expected):
    assert cartesian(lists) == expected


def test_flatten():
    assert flatten([[1, 2], [3, 4, 5], [6]]) == [1, 2, 3, 4, 5, 6]


def test_flatten_empty():
    assert flatten([]) == []
    assert flatten([[], []]) == []