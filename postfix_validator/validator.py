import logging
from datetime import datetime

import postfix_validator.constants as cst
from postfix_validator.extra import utils
from postfix_validator.extra.types import Context, ValidationResult
from postfix_validator.rpn import ConverterRPN
from postfix_validator.tokenizer import Tokenizer


@utils.init_default_ctx
class PostfixValidator:
    """
    Checks a postfix candidate against the postfix form of an infix command
    :param ctx: Context
    """
    def __init__(self, ctx: Context | None = None, logger: logging.Logger | None = None):
        self.ctx = ctx
        self.logger = logger or logging.getLogger(__name__)
        self.tokenizer = Tokenizer(ctx=self.ctx, logger=self.logger)
        self.converter = ConverterRPN(ctx=self.ctx, logger=self.logger)

    @utils.log_exception
    def validate(self, command: str, postfix: str) -> ValidationResult:
        """
        Validates postfix candidate
        :param command: infix command line expression
        :param postfix: postfix candidate
        :return: ValidationResult. Failures are reported in it, nothing is raised
        """
        timestamp = datetime.now().strftime(cst.TIME_FORMAT)
        command_tokens = self.tokenizer.tokenize(command)
        postfix_tokens = self.tokenizer.tokenize(postfix)

        if not command_tokens or not postfix_tokens:
            self.logger.debug(f"empty input: {command=} {postfix=}")
            return ValidationResult(command, postfix, False, error_message=cst.EMPTY_INPUT_MESSAGE,
                                    timestamp=timestamp)

        expected = self.converter.rpn(command_tokens)
        is_valid = expected == postfix_tokens
        self.logger.debug(f"{is_valid=}: {expected=} {postfix_tokens=}")

        return ValidationResult(command, postfix, is_valid, expected, postfix_tokens, timestamp=timestamp)


def validate(command: str, postfix: str, ctx: Context | None = None) -> ValidationResult:
    return PostfixValidator(ctx=ctx).validate(command, postfix)
