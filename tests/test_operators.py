import pytest

import postfix_validator.constants as cst
from postfix_validator.extra import utils
from postfix_validator.extra.exceptions import InvalidOperatorError
from postfix_validator.extra.types import Context, Operator
from postfix_validator.operators import ValidOperatorTable
from postfix_validator.rpn import ConverterRPN
from postfix_validator.tokenizer import Tokenizer
from postfix_validator.vars import OPERATORS

GROUPING = [("(", 0, "open"), (")", 0, "close")]


@pytest.mark.parametrize(
    "symbol, precedence",
    [
        ("(", 0), (")", 0), ("||", 1), ("&&", 2), ("|", 3), (";", 4),
        (">", 5), (">>", 5), ("<", 5), ("2>", 5),
    ]
)
def test_default_table(symbol, precedence):
    assert utils.is_operator(symbol, OPERATORS)
    assert utils.precedence_of(symbol, OPERATORS) == precedence
    assert utils.description_of(symbol, OPERATORS)


@pytest.mark.parametrize("token", ["ls", "&", "2", ">>>", "", '"||"'])
def test_not_operator(token):
    assert not utils.is_operator(token, OPERATORS)
    assert utils.precedence_of(token, OPERATORS) == cst.UNKNOWN_PRECEDENCE
    assert utils.description_of(token, OPERATORS) is None


def test_unknown_precedence_is_lowest():
    assert all(cst.UNKNOWN_PRECEDENCE < op.precedence for op in OPERATORS.values())


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        OPERATORS["&"] = Operator(2, "background")  # type: ignore


def test_default_ctx():
    assert Context().operators is OPERATORS
    assert Tokenizer().ctx.operators is OPERATORS
    assert Tokenizer(None).ctx.operators is OPERATORS
    assert ConverterRPN(ctx=None).ctx.operators is OPERATORS


def test_valid_table():
    table = ValidOperatorTable(GROUPING + [("+", 1, "add"), ("*", 2, "mul")])
    ctx = table.to_context()
    assert ctx.operators["*"] == Operator(2, "mul")
    assert utils.precedence_of("+", ctx.operators) == 1
    assert Tokenizer(ctx).ctx is ctx


@pytest.mark.parametrize(
    "entries, exc_type",
    [
        (GROUPING + [("+", 1, "add"), ("+", 2, "add again")], "duplicate"),
        (GROUPING + [("+", -1, "add")], "precedence"),
        (GROUPING + [("+", 1.5, "add")], "precedence"),
        (GROUPING + [("+", True, "add")], "precedence"),
        (GROUPING + [("", 1, "empty")], "symbol"),
        (GROUPING + [("a b", 1, "space")], "symbol"),
        (GROUPING + [("'", 1, "quote")], "symbol"),
        ([("(", 0, "open"), ("+", 1, "add")], "symbol"),
        ([], "symbol"),
    ]
)
def test_invalid_table(entries, exc_type):
    with pytest.raises(InvalidOperatorError) as exc_info:
        ValidOperatorTable(entries)
    assert exc_info.value.exc_type == exc_type
