from argscan.parser import ONE_OR_MORE, ZERO_OR_MORE, Arity, GrammarRegistry, UsageFormatter


def test_empty_registry():
    formatter = UsageFormatter(GrammarRegistry())
    assert formatter.render("app") == "Usage: app"
    assert formatter.render() == "Usage: "


def test_required_then_optional_then_final():
    registry = GrammarRegistry()
    registry.register("-v", arity=Arity.fixed(0))
    registry.register("-n", "--name", required=True)
    registry.register(None, "--strings", arity=ONE_OR_MORE)
    registry.register(None, "--tags", arity=ZERO_OR_MORE, required=True)
    registry.register_final("output")
    formatter = UsageFormatter(registry, width=120)
    assert formatter.render("app") == (
        "Usage: app --name NAME --tags [TAGS [TAGS...]] [-v] "
        "[--strings STRINGS [STRINGS...]] OUTPUT"
    )


def test_optional_final_is_not_bracketed():
    registry = GrammarRegistry()
    registry.register_final("files", arity=ONE_OR_MORE, required=False)
    assert UsageFormatter(registry).render("app") == "Usage: app FILES [FILES...]"


def test_large_fixed_count_is_elided():
    registry = GrammarRegistry()
    registry.register(None, "--point", arity=Arity.fixed(5), required=True)
    assert (
        UsageFormatter(registry).render("app")
        == "Usage: app --point POINT POINT POINT ..."
    )


def test_app_name_with_space_is_quoted():
    assert UsageFormatter(GrammarRegistry()).render("my app") == 'Usage: "my app"'


def test_long_usage_wraps_under_first_argument():
    registry = GrammarRegistry()
    for name in ("--alpha", "--bravo", "--charlie", "--delta", "--echo", "--foxtrot"):
        registry.register(None, name)
    lines = UsageFormatter(registry, width=50).render("app").split("\n")
    assert lines[0] == "Usage: app [--alpha ALPHA] [--bravo BRAVO]"
    assert lines[1] == "           [--charlie CHARLIE] [--delta DELTA]"
    assert lines[2] == "           [--echo ECHO] [--foxtrot FOXTROT]"
    assert all(len(line) <= 50 for line in lines)


def test_render_is_deterministic():
    registry = GrammarRegistry()
    registry.register("-a")
    registry.register("-b", required=True)
    formatter = UsageFormatter(registry)
    assert formatter.render("app") == formatter.render("app")


def test_render_help():
    registry = GrammarRegistry()
    registry.register("-i", "--input", default="123", help="An integer.")
    registry.register(None, "--strings", arity=ONE_OR_MORE)
    registry.register_final("output", help="Output path.")
    text = UsageFormatter(registry).render_help("app", "Does things.")
    sections = text.split("\n\n")
    assert sections[0] == "Usage: app [--input INPUT] [--strings STRINGS [STRINGS...]] OUTPUT"
    assert sections[1] == "Does things."
    assert sections[2] == "positional:\n  " + f"{'OUTPUT':<30} Output path."
    assert sections[3].splitlines() == [
        "options:",
        "  " + f"{'-i, --input INPUT':<30} An integer. (default: 123)",
        "  --strings STRINGS [STRINGS...]",
    ]


def test_render_help_wraps_long_labels():
    registry = GrammarRegistry()
    registry.register(None, "--a-very-long-option-name", arity=ONE_OR_MORE, help="Help.")
    text = UsageFormatter(registry).render_help("app")
    lines = text.split("\n\n")[1].splitlines()
    assert lines[1] == "  --a-very-long-option-name A-VERY-LONG-OPTION-NAME [A-VERY-LONG-OPTION-NAME...]"
    assert lines[2] == " " * 33 + "Help."
