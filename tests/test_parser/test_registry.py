import pytest

from argscan.exceptions import (
    DuplicateArgumentNameError,
    DuplicateFinalArgumentError,
    InvalidArgumentNameError,
    InvalidArityError,
)
from argscan.parser import (
    ONE_OR_MORE,
    ZERO_OR_MORE,
    Arity,
    GrammarRegistry,
    ScalarSlot,
    SequenceSlot,
)


def test_register_indexes_both_names():
    registry = GrammarRegistry()
    index = registry.register("-i", "--input")
    assert index == 0
    assert registry.lookup("-i") == 0
    assert registry.lookup("--input") == 0
    assert registry.lookup("input") is None
    assert registry.resolve("input") == 0
    assert registry.resolve("i") == 0
    assert registry.resolve("--input") == 0


def test_register_requires_a_name():
    registry = GrammarRegistry()
    with pytest.raises(InvalidArgumentNameError):
        registry.register()
    with pytest.raises(InvalidArgumentNameError):
        registry.register("", "")


@pytest.mark.parametrize(
    "short_name,long_name",
    [
        ("x", None),
        ("-xy", None),
        ("--x", None),
        ("-", None),
        ("-!", None),
        (None, "name"),
        (None, "-name"),
        (None, "--a"),
        (None, "---ab"),
        ("--name", None),
        (None, "-n"),
    ],
)
def test_register_rejects_malformed_names(short_name, long_name):
    registry = GrammarRegistry()
    with pytest.raises(InvalidArgumentNameError):
        registry.register(short_name, long_name)
    assert registry.is_empty()


def test_register_rejects_duplicate_names():
    registry = GrammarRegistry()
    registry.register("-n", "--name")
    with pytest.raises(DuplicateArgumentNameError):
        registry.register("-n")
    with pytest.raises(DuplicateArgumentNameError):
        registry.register(None, "--name")
    assert len(registry) == 1


def test_required_count_skips_defaults():
    registry = GrammarRegistry()
    registry.register("-a", required=True)
    registry.register("-b", required=True, default="1")
    registry.register("-c")
    assert registry.required_count == 1


def test_slot_shapes_follow_arity():
    registry = GrammarRegistry()
    registry.register("-a", arity=Arity.fixed(1), default="x")
    registry.register("-b", arity=Arity.fixed(0))
    registry.register("-c", arity=Arity.fixed(2))
    registry.register("-d", arity=ONE_OR_MORE)
    registry.register("-e", arity=ZERO_OR_MORE)
    assert isinstance(registry.slot(0), ScalarSlot)
    assert registry.slot(0).value == "x"
    for index in range(1, 5):
        assert isinstance(registry.slot(index), SequenceSlot)
        assert registry.slot(index).values == []


def test_register_final():
    registry = GrammarRegistry()
    index = registry.register_final("output")
    assert registry.final_index == index
    assert registry.final.canonical_name == "--output"
    assert registry.final.final
    assert registry.required_count == 1
    assert registry.lookup("--output") is None
    assert registry.resolve("output") == index
    assert registry.named_arguments() == []


def test_register_final_single_character_name():
    registry = GrammarRegistry()
    registry.register_final("o")
    assert registry.final.canonical_name == "-o"
    assert registry.resolve("o") == 0


def test_register_final_only_once():
    registry = GrammarRegistry()
    registry.register_final("output")
    with pytest.raises(DuplicateFinalArgumentError):
        registry.register_final("other")


@pytest.mark.parametrize("arity", [ZERO_OR_MORE, Arity.fixed(0)])
def test_register_final_rejects_arity(arity):
    registry = GrammarRegistry()
    with pytest.raises(InvalidArityError):
        registry.register_final("output", arity=arity)


def test_register_final_rejects_taken_or_empty_name():
    registry = GrammarRegistry()
    registry.register(None, "--output")
    with pytest.raises(DuplicateArgumentNameError):
        registry.register_final("output")
    with pytest.raises(InvalidArgumentNameError):
        registry.register_final("")


def test_clear():
    registry = GrammarRegistry()
    registry.register("-a", required=True)
    registry.register_final("output")
    registry.clear()
    assert registry.is_empty()
    assert len(registry) == 0
    assert registry.required_count == 0
    assert registry.final is None
    assert registry.resolve("a") is None
    registry.register_final("output")
    assert registry.final_index == 0


def test_str():
    registry = GrammarRegistry()
    registry.register("-a", required=True)
    assert str(registry) == "GrammarRegistry(args=1, names=1, required=1, final=False)"
