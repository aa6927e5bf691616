import pytest

from argscan.mode import ErrorMode


@pytest.mark.parametrize(
    "value,expected",
    [
        ("raise", ErrorMode.RAISE),
        ("exceptions", ErrorMode.RAISE),
        ("EXIT", ErrorMode.EXIT),
        ("report", ErrorMode.EXIT),
        ("report-and-exit", ErrorMode.EXIT),
        (ErrorMode.RAISE, ErrorMode.RAISE),
    ],
)
def test_error_mode_values(value, expected):
    assert ErrorMode(value) is expected


@pytest.mark.parametrize("value", ["ignore", 1, None])
def test_error_mode_invalid(value):
    with pytest.raises(ValueError):
        ErrorMode(value)


def test_str():
    assert str(ErrorMode.EXIT) == "exit"
