import logging
import re

import postfix_validator.constants as cst
from postfix_validator.extra import utils
from postfix_validator.extra.types import Context


@utils.init_default_ctx
class Tokenizer:
    def __init__(self, ctx: Context | None = None, logger: logging.Logger | None = None):
        self.ctx = ctx
        self.logger = logger or logging.getLogger(__name__)
        self.pattern = self._compile_pattern()

    def _compile_pattern(self) -> re.Pattern:
        """
        Builds token regex: quoted spans, operators(longest first), then a word.
        A word is a run of non-whitespace which ends where an operator begins.
        Operators starting with a letter or digit(e.g. '2>') end a word only at its start
        """
        quoted = [f"{q}[^{q}]*{q}" for q in cst.QUOTES]
        symbols = sorted(filter(None, self.ctx.operators.keys()), key=len, reverse=True)
        ops = [re.escape(symbol) for symbol in symbols]
        stops = [re.escape(symbol) for symbol in symbols if not symbol[0].isalnum()]
        word = rf"\S(?:(?!{'|'.join(stops)})\S)*" if stops else r"\S+"
        return re.compile("|".join(quoted + ops + [word]))

    @utils.log_exception
    def tokenize(self, expression: str) -> list[str]:
        """
        Tokenizes the expression
        :param expression: raw command line expression
        :return: list of tokens(empty for empty or whitespace-only expression)
        """
        expression = expression.strip()
        if not expression:
            return []

        tokens: list[str] = self.pattern.findall(expression)

        for token in tokens:
            if token[0] in cst.QUOTES and (len(token) == 1 or token[-1] != token[0]):
                self.logger.warning(f"Unterminated quote in '{token}', read as a plain word")

        self.logger.debug(f"{tokens=}")
        return tokens


def tokenize(expression: str, ctx: Context | None = None) -> list[str]:
    return Tokenizer(ctx=ctx).tokenize(expression)
