import logging

import postfix_validator.constants as cst
from postfix_validator.extra import utils
from postfix_validator.extra.types import Context, ValidationResult
from postfix_validator.history import ValidationHistory
from postfix_validator.validator import PostfixValidator


@utils.init_default_ctx
class Session:
    """
    State of one interactive session: current inputs, last result and history
    :param ctx: Context
    """
    def __init__(self, ctx: Context | None = None, logger: logging.Logger | None = None):
        self.ctx = ctx
        self.logger = logger or logging.getLogger(__name__)
        self.validator = PostfixValidator(ctx=self.ctx, logger=self.logger)
        self.history = ValidationHistory()
        self.command = ""
        self.postfix = ""
        self.result: ValidationResult | None = None

    @utils.log_exception
    def validate(self) -> ValidationResult:
        """
        Validates current inputs. Results with an error message are not recorded into history
        :return: ValidationResult
        """
        self.result = self.validator.validate(self.command, self.postfix)
        if self.result.error_message is None:
            self.history.add(self.result)
        return self.result

    def clear_all(self) -> None:
        self.command = ""
        self.postfix = ""
        self.result = None

    def clear_history(self) -> None:
        self.history.clear()

    def load_example(self) -> None:
        self.command = cst.EXAMPLE_COMMAND
        self.postfix = cst.EXAMPLE_POSTFIX
