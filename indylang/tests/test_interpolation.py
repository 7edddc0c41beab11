"""
Tests for the variable environment and string interpolation.
"""
from indylang.environment import Environment
from indylang.interpolation import interpolate


def test_undefined_variable_reads_empty():
    env = Environment()
    assert env.get("Ghost") == ""
    assert "Ghost" not in env


def test_set_creates_and_overwrites():
    env = Environment()
    env.set("Name", "bob")
    env.set("Name", "alice")
    assert env.get("Name") == "alice"
    assert env.as_dict() == {"Name": "alice"}


def test_template_without_placeholders_is_unchanged():
    env = Environment({"A": "1"})
    assert interpolate("plain text, no vars", env) == "plain text, no vars"


def test_placeholders_are_substituted_left_to_right():
    env = Environment({"First": "Ada", "Last": "Lovelace"})
    assert interpolate("{First} {Last} ({First})", env) == "Ada Lovelace (Ada)"


def test_unknown_placeholder_is_empty():
    assert interpolate("Hello {Ghost}!", Environment()) == "Hello !"


def test_substitution_is_not_recursive():
    """A substituted value is not scanned again."""
    env = Environment({"A": "{B}", "B": "nope"})
    assert interpolate("{A}", env) == "{B}"


def test_unmatched_braces_are_kept():
    env = Environment({"A": "x"})
    assert interpolate("{ A } {A} {A {}", env) == "{ A } x {A {}"
