# tests/format/test_error_format.py
"""
Error Format Tests - short, extended and quoted renderings
"""

import pytest

from failchain import new, wrap, with_message, ensure_stack, format_error, stack_trace_of
from failchain.config import FailChainConfig, FormatConfig, set_config
from failchain.core.format import parse_spec, quote, FormatSpec, PLUS, SHARP


def make_error():
    return new("disk full")


@pytest.mark.parametrize("spec", ["", "s", "v", "%s", "%v"])
def test_short_verbs_render_message_only(spec):
    err = wrap(make_error(), "read config")

    assert format(err, spec) == "read config: disk full"


def test_fstring_uses_same_verbs():
    err = wrap(make_error(), "read config")

    assert f"{err}" == "read config: disk full"
    assert f"{err:q}" == '"read config: disk full"'
    assert f"{err:+v}".startswith("read config: disk full\n")


def test_extended_verb_appends_stack():
    err = make_error()
    stack = stack_trace_of(err)

    text = format(err, "+v")

    assert text == "disk full" + format(stack, "+v")
    assert text.split("\n")[1].endswith(".make_error")
    assert text.count("\n\t") == len(stack)


def test_extended_verb_accepts_printf_prefix():
    err = make_error()

    assert format(err, "%+v") == format(err, "+v")


def test_extended_verb_without_stack_is_short_text():
    err = with_message(ValueError("bad input"), "parse")

    assert format(err, "+v") == "parse: bad input"


def test_extended_verb_disabled_by_config():
    set_config(FailChainConfig(format=FormatConfig(show_stack=False)))
    err = make_error()

    assert format(err, "+v") == "disk full"


def test_pass_through_wrapper_formats_like_wrapped_error():
    err = make_error()

    wrapped = ensure_stack(err)

    assert format(wrapped, "s") == format(err, "s")
    assert format(wrapped, "+v") == format(err, "+v")


def test_quoted_verb_escapes_quotes():
    """
    Test: q surrounds the short text in double quotes with inner quotes escaped
    """
    err = wrap(new('key "id" missing'), "lookup")

    assert format(err, "q") == '"lookup: key \\"id\\" missing"'


def test_quoted_verb_escapes_control_characters():
    err = new("line one\nline\ttwo\\")

    assert format(err, "q") == '"line one\\nline\\ttwo\\\\"'


def test_unknown_verb_falls_back_to_short_text():
    err = make_error()

    assert format(err, "x") == "disk full"
    assert format(err, "#v") == "disk full"


def test_format_error_handles_foreign_exceptions():
    leaf = ValueError('bad "input"')

    assert format_error(leaf) == 'bad "input"'
    assert format_error(leaf, "q") == '"bad \\"input\\""'
    assert format_error(leaf, "+v") == 'bad "input"'


def test_format_error_on_chained_foreign_exception_finds_stack():
    origin = make_error()
    try:
        raise RuntimeError("outer") from origin
    except RuntimeError as e:
        outer = e

    assert format_error(outer, "+v") == "outer" + format(origin.stack_trace(), "+v")


def test_unstringifiable_error_renders_placeholder():
    class Broken(Exception):
        def __str__(self):
            raise RuntimeError("no text")

    err = with_message(Broken(), "context")

    assert str(err) == "context: <unstringifiable>"
    assert format_error(Broken()) == "<unstringifiable>"


def test_parse_spec():
    assert parse_spec("") == FormatSpec()
    assert parse_spec("+v") == FormatSpec(verb="v", flags=frozenset({PLUS}))
    assert parse_spec("%#+s") == FormatSpec(verb="s", flags=frozenset({PLUS, SHARP}))
    assert parse_spec("+") == FormatSpec(verb="v", flags=frozenset({PLUS}))
    assert parse_spec("+v").plus
    assert not parse_spec("v").flag(SHARP)


def test_quote_keeps_printable_unicode():
    assert quote("naïve café") == '"naïve café"'


def test_width_and_alignment_apply_to_short_text():
    err = wrap(make_error(), "read config")

    assert f"{err:>30}" == " " * 8 + "read config: disk full"
    assert f"{err:<25}|" == "read config: disk full   |"
    assert f"{err:^26}" == "  read config: disk full  "
    assert format_error(ValueError("bad"), "*^7") == "**bad**"


def test_truncation_spec_applies_to_short_text():
    err = make_error()

    assert f"{err:.4}" == "disk"
