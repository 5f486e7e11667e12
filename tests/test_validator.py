import re

import pytest

import postfix_validator.constants as cst
from postfix_validator.operators import ValidOperatorTable
from postfix_validator.validator import PostfixValidator, validate


@pytest.mark.parametrize(
    "command, postfix",
    [
        ("cmd1 && cmd2 || cmd3", "cmd1 cmd2 && cmd3 ||"),
        ("ls -l && grep \"err\" log.txt", "ls -l grep \"err\" log.txt &&"),
        ("(a || b) && c", "a b || c &&"),
        ("cat f | sort > out", "cat   f sort out > |"),
        (cst.EXAMPLE_COMMAND, cst.EXAMPLE_POSTFIX),
    ]
)
def test_valid(command, postfix):
    result = validate(command, postfix)
    assert result.is_valid
    assert result.error_message is None


@pytest.mark.parametrize(
    "command, postfix",
    [
        ("ls -l && grep \"err\" log.txt", "ls -l grep err log.txt &&"),
        ("cmd1 && cmd2 || cmd3", "cmd1 cmd2 cmd3 || &&"),
        ("cmd1 && cmd2", "cmd1 cmd2 && extra"),
        ("cmd1 && cmd2", "cmd1 cmd2"),
        ("Cmd1 && cmd2", "cmd1 cmd2 &&"),
        ("echo 'x'", "echo \"x\""),
    ]
)
def test_invalid(command, postfix):
    result = validate(command, postfix)
    assert not result.is_valid
    assert result.error_message is None
    assert result.expected_sequence is not None
    assert result.provided_sequence is not None


@pytest.mark.parametrize(
    "command, postfix",
    [
        ("", "anything"),
        ("anything", ""),
        ("   ", "\t"),
        ("", ""),
    ]
)
def test_empty_inputs(command, postfix):
    result = validate(command, postfix)
    assert not result.is_valid
    assert result.error_message == cst.EMPTY_INPUT_MESSAGE
    assert result.expected_sequence is None
    assert result.provided_sequence is None
    assert result.expected == result.provided == ""


def test_result_fields():
    result = PostfixValidator().validate("a && b || c", "a  b c || &&")
    assert result.input_command == "a && b || c"
    assert result.input_postfix == "a  b c || &&"
    assert result.expected_sequence == ["a", "b", "&&", "c", "||"]
    assert result.provided_sequence == ["a", "b", "c", "||", "&&"]
    assert result.expected == "a b && c ||"
    assert result.provided == "a b c || &&"
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}", result.timestamp)


def test_unbalanced_grouping_is_not_an_error():
    result = validate("( a && b", "a b && (")
    assert result.is_valid
    assert result.error_message is None


def test_custom_context():
    ctx = ValidOperatorTable([("(", 0, ""), (")", 0, ""), ("+", 1, "add"), ("*", 2, "mul")]).to_context()
    assert validate("a+b*c", "a b c * +", ctx=ctx).is_valid
    assert not validate("a+b*c", "a b + c *", ctx=ctx).is_valid


def test_operand_ending_in_digit_before_redirect():
    result = validate("cmd1 && cmd2>out", "cmd1 cmd2 out > &&")
    assert result.is_valid
    assert result.expected == "cmd1 cmd2 out > &&"
