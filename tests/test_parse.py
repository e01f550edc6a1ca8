import pytest

from web_counter.app import parse_parameter
from web_counter.store import MAX_COUNT


@pytest.mark.parametrize(
    "body, expected",
    [
        ("diff=1", 1),
        ("diff=0", 0),
        ("diff=+7", 7),
        ("diff=007", 7),
        ("diff=3&foo=bar", 3),
        ("diff=3&diff=9", 3),
        ("diff=4=5", 4),
        (f"diff={MAX_COUNT}", MAX_COUNT),
    ],
)
def test_accepted(body, expected):
    assert parse_parameter(body) == expected


@pytest.mark.parametrize(
    "body",
    [
        "",
        "diff",
        "diff=",
        "diff=abc",
        "diff=-1",
        "diff= 1",
        "diff=1_000",
        "diff=%31",
        "foo=1",
        "foo=1&diff=1",
        "DIFF=1",
        f"diff={MAX_COUNT + 1}",
    ],
)
def test_rejected(body):
    assert parse_parameter(body) is None
