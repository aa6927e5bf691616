import pytest

from argscan.exceptions import (
    EmptyValueError,
    RetrievalError,
    ShapeMismatchError,
    TypeConversionError,
)
from argscan.parser import ScalarSlot, SequenceSlot


def test_scalar_slot_starts_at_default():
    slot = ScalarSlot(default="7")
    assert slot.native() == "7"
    assert slot.count() == 1
    slot.store("9")
    assert slot.get("n", int) == 9
    slot.reset()
    assert slot.native() == "7"


@pytest.mark.parametrize(
    "value,target_type,expected",
    [
        ("42", int, 42),
        ("-3", int, -3),
        ("3.5", float, 3.5),
        ("1e3", float, 1000.0),
        ("hello", str, "hello"),
        ("yes", bool, True),
        ("off", bool, False),
    ],
)
def test_scalar_conversion(value, target_type, expected):
    slot = ScalarSlot()
    slot.store(value)
    assert slot.get("value", target_type) == expected


@pytest.mark.parametrize(
    "value,target_type",
    [("abc", int), ("4.2", int), ("1,5", float), ("", int), ("maybe", bool)],
)
def test_scalar_conversion_errors(value, target_type):
    slot = ScalarSlot()
    slot.store(value)
    error_type = EmptyValueError if not value else TypeConversionError
    with pytest.raises(error_type):
        slot.get("value", target_type)


def test_empty_scalar_slot():
    slot = ScalarSlot()
    assert slot.count() == 0
    with pytest.raises(EmptyValueError):
        slot.get("name", str)


@pytest.mark.parametrize("target_type", [list, list[str], tuple, list[int]])
def test_scalar_slot_rejects_sequence_types(target_type):
    slot = ScalarSlot(default="1")
    with pytest.raises(ShapeMismatchError):
        slot.get("name", target_type)


def test_scalar_slot_rejects_unsupported_type():
    slot = ScalarSlot(default="1")
    with pytest.raises(TypeConversionError):
        slot.get("name", dict)


def test_sequence_slot():
    slot = SequenceSlot()
    assert slot.get("items", list) == []
    assert slot.count() == 0
    for token in ("1", "2", "3"):
        slot.store(token)
    assert slot.count() == 3
    assert slot.get("items", list) == ["1", "2", "3"]
    assert slot.get("items", list[str]) == ["1", "2", "3"]
    assert slot.get("items", list[int]) == [1, 2, 3]
    assert slot.get("items", list[float]) == [1.0, 2.0, 3.0]
    assert slot.get("items", tuple) == ("1", "2", "3")
    assert slot.get("items", tuple[int, ...]) == (1, 2, 3)
    assert slot.native() == ["1", "2", "3"]
    slot.reset()
    assert slot.native() == []


@pytest.mark.parametrize("target_type", [str, int, float, bool])
def test_sequence_slot_rejects_scalar_types(target_type):
    slot = SequenceSlot(["1"])
    with pytest.raises(ShapeMismatchError):
        slot.get("items", target_type)


def test_sequence_conversion_error():
    slot = SequenceSlot(["1", "two"])
    with pytest.raises(TypeConversionError):
        slot.get("items", list[int])


def test_retrieval_errors_are_builtin_compatible():
    slot = SequenceSlot(["1"])
    with pytest.raises(TypeError):
        slot.get("items", int)
    with pytest.raises(ValueError):
        SequenceSlot(["x"]).get("items", list[int])
    with pytest.raises(RetrievalError):
        ScalarSlot().get("name", str)
