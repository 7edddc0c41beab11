"""
Tests for block parsing and structural errors in Indy-lang.
"""
import pytest

from indylang.exceptions import (
    DuplicateElseException,
    InvalidArgumentException,
    MismatchedTerminatorException,
    MissingScriptException,
    NestedScriptException,
    UnterminatedBlockException,
)
from indylang.lexer import tokenize
from indylang.operations import FOREVER, Op
from indylang.parser import Parser
from indylang.tests.utils import parse_source, wrap


def test_script_node_and_leaf_commands():
    """Every line inside start...end becomes a node in order."""
    source = (
        "start\n"
        "# greet\n"
        'Name="bob"\n'
        "\n"
        'say "Hi {Name}"\n'
        "wait 0.5\n"
        'prompt Age="How old are you?"\n'
        "jump around\n"
        "end\n"
    )
    script = parse_source(source)
    assert script[0] == 'script'
    assert script[-1] == 1
    assert script[1] == (
        ('comment', 'greet', 2),
        ('assign', 'Name', 'bob', 3),
        ('blank', 4),
        ('say', 'Hi {Name}', 5),
        ('wait', 0.5, 6),
        ('prompt', 'Age', 'How old are you?', 7),
        ('unknown', 'jump around', 8),
    )


def test_if_else_nesting():
    """``else`` switches the innermost ``if`` to its else body."""
    script = parse_source(wrap(
        'if A == "1"',
        '  if B != "2"',
        '    say "inner"',
        '  else',
        '    say "inner else"',
        '  end if',
        'else',
        '  say "outer else"',
        'end if',
    ))
    outer = script[1][0]
    assert outer[0] == 'if'
    assert outer[1] == (Op.EQ, '{A}', '1', 2)
    inner = outer[2][0]
    assert inner[1] == (Op.NE, '{B}', '2', 3)
    assert inner[2] == (('say', 'inner', 4),)
    assert inner[3] == (('say', 'inner else', 6),)
    assert outer[3] == (('say', 'outer else', 9),)


def test_if_without_else_has_empty_else_body():
    script = parse_source(wrap('if A == "1"', 'say "x"', 'end if'))
    assert script[1][0][3] == ()


def test_loop_count_and_body_are_parsed():
    """Loops keep their count and body even though the body never runs."""
    script = parse_source(wrap('loop 3', 'say "X"', 'end loop', 'loop forever', 'end loop'))
    first, second = script[1]
    assert first == ('loop', 3, (('say', 'X', 3),), 2)
    assert second == ('loop', FOREVER, (), 5)


def test_templated_left_side_is_kept():
    """A non-identifier left side is treated as a template."""
    script = parse_source(wrap('if "{A}-{B}" == "1-2"', 'end if'))
    assert script[1][0][1] == (Op.EQ, '{A}-{B}', '1-2', 2)


def test_lines_outside_script_are_ignored():
    """Content before start and after end is recorded, not parsed."""
    source = 'say "before"\nstart\nsay "inside"\nend\nbogus line\nend if\n'
    parser = Parser(tokenize(source), "<test>")
    script = parser.parse()
    assert script[1] == (('say', 'inside', 3),)
    assert [t.line for t in parser.ignored] == [1, 5, 6]


def test_parsing_is_idempotent():
    """Parsing the same text twice gives equal trees."""
    source = wrap('X="1"', 'if X == "1"', 'loop 2', 'say "a"', 'end loop', 'else', 'wait 1', 'end if')
    assert parse_source(source) == parse_source(source)


def test_unterminated_if():
    """A missing ``end if`` reports the block kind and opening line."""
    with pytest.raises(UnterminatedBlockException) as exc:
        parse_source('start\nsay "hi"\nif X == "y"\nsay "yes"\n')
    assert exc.value.kind == 'if'
    assert exc.value.opened_on == 3
    assert "end if" in str(exc.value)


def test_unterminated_script():
    with pytest.raises(UnterminatedBlockException) as exc:
        parse_source('start\nsay "hi"\n')
    assert exc.value.kind == 'start'
    assert exc.value.opened_on == 1


def test_mismatched_terminator():
    """``end if`` cannot close a loop."""
    with pytest.raises(MismatchedTerminatorException) as exc:
        parse_source(wrap('loop 2', 'end if'))
    assert exc.value.expected == 'end loop'
    assert exc.value.found == 'end if'
    assert exc.value.line == 3
    assert exc.value.opened_on == 2


def test_end_closing_open_if_is_mismatched():
    with pytest.raises(MismatchedTerminatorException) as exc:
        parse_source('start\nif A == "b"\nend\n')
    assert exc.value.expected == 'end if'
    assert exc.value.found == 'end'


def test_else_outside_if():
    with pytest.raises(MismatchedTerminatorException):
        parse_source(wrap('else'))


def test_duplicate_else():
    with pytest.raises(DuplicateElseException) as exc:
        parse_source(wrap('if A == "1"', 'else', 'else', 'end if'))
    assert exc.value.line == 4
    assert exc.value.opened_on == 2


def test_missing_start():
    with pytest.raises(MissingScriptException):
        parse_source('say "hi"\n')


def test_nested_start():
    with pytest.raises(NestedScriptException):
        parse_source(wrap('start'))


@pytest.mark.parametrize("line", ["wait", "wait soon", "wait nan", "wait inf"])
def test_malformed_wait(line):
    """Non-numeric durations fail at parse time with the line number."""
    with pytest.raises(InvalidArgumentException) as exc:
        parse_source(wrap(line))
    assert exc.value.command == 'wait'
    assert exc.value.line == 2


def test_negative_wait_clamps_to_zero():
    assert parse_source(wrap('wait -2'))[1] == (('wait', 0.0, 2),)


@pytest.mark.parametrize("line", ["loop", "loop -1", "loop 2.5", "loop always"])
def test_malformed_loop(line):
    with pytest.raises(InvalidArgumentException) as exc:
        parse_source(wrap(line, 'end loop'))
    assert exc.value.command == 'loop'


@pytest.mark.parametrize("line", ['prompt Name', 'prompt Na me="msg"', 'prompt 9lives="msg"'])
def test_malformed_prompt(line):
    with pytest.raises(InvalidArgumentException):
        parse_source(wrap(line))


def test_if_without_operator():
    with pytest.raises(InvalidArgumentException):
        parse_source(wrap('if X', 'end if'))


def test_structural_errors_are_syntax_errors():
    """Hosts can catch every parse failure as SyntaxError."""
    with pytest.raises(SyntaxError):
        parse_source(wrap('if X == "1"'))
