from types import MappingProxyType
from typing import Iterable

import postfix_validator.constants as cst
from postfix_validator.extra.exceptions import InvalidOperatorError
from postfix_validator.extra.types import Context, Operator
from postfix_validator.extra.utils import CallAllMethods


class ValidOperatorTable(CallAllMethods):
    """
    Builds a custom operator table and checks it
    :param entries: iterable of (symbol, precedence, description)
    :raises InvalidOperatorError: duplicated symbol, invalid precedence or invalid symbol
    """
    def __init__(self, entries: Iterable[tuple[str, int, str]]):
        self.entries = list(entries)

        self.call_all_methods()

        self.operators = MappingProxyType({
            symbol: Operator(precedence, description) for symbol, precedence, description in self.entries
        })

    def _check_duplicates(self) -> None:
        seen: set[str] = set()
        for symbol, _, _ in self.entries:
            if symbol in seen:
                raise InvalidOperatorError(f"Operator '{symbol}' defined twice", exc_type="duplicate")
            seen.add(symbol)

    def _check_precedence(self) -> None:
        for symbol, precedence, _ in self.entries:
            if isinstance(precedence, bool) or not isinstance(precedence, int):
                raise InvalidOperatorError(f"Precedence of '{symbol}' must be an integer, got {precedence!r}",
                                           exc_type="precedence")
            if precedence < 0:
                raise InvalidOperatorError(f"Precedence of '{symbol}' must be non-negative, got {precedence}",
                                           exc_type="precedence")

    def _check_symbols(self) -> None:
        symbols = [symbol for symbol, _, _ in self.entries]
        for symbol in symbols:
            if not symbol or any(s.isspace() or s in cst.QUOTES for s in symbol):
                raise InvalidOperatorError(f"Invalid operator symbol: '{symbol}'", exc_type="symbol")
        for group in (cst.GROUP_OPEN, cst.GROUP_CLOSE):
            if group not in symbols:
                raise InvalidOperatorError(f"Grouping symbol '{group}' is missing", exc_type="symbol")

    def to_context(self) -> Context:
        return Context(operators=self.operators)
