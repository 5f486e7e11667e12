from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class Operator:
    """
    Class representing a command line operator
    :param precedence: precedence of operator(higher binds tighter)
    :param description: human-readable description shown in help
    """
    precedence: int
    description: str


def default_operators() -> Mapping[str, Operator]:
    from postfix_validator.vars import OPERATORS
    return OPERATORS


@dataclass
class Context:
    """
    Class representing a context
    :param operators: map from operator symbol to Operator dataclass
    """
    operators: Mapping[str, Operator] = field(default_factory=default_operators)


@dataclass
class ValidationResult:
    """
    Result of one validation request
    :param input_command: raw infix command as entered
    :param input_postfix: raw postfix candidate as entered
    :param is_valid: True if candidate equals the expected postfix sequence
    :param expected_sequence: postfix tokens computed from the command(None if inputs were empty)
    :param provided_sequence: tokens of the candidate(None if inputs were empty)
    :param error_message: set only when an input had no tokens
    :param timestamp: local time of validation
    """
    input_command: str
    input_postfix: str
    is_valid: bool
    expected_sequence: list[str] | None = None
    provided_sequence: list[str] | None = None
    error_message: str | None = None
    timestamp: str = ""

    @property
    def expected(self) -> str:
        return " ".join(self.expected_sequence or [])

    @property
    def provided(self) -> str:
        return " ".join(self.provided_sequence or [])
