import logging

import postfix_validator.constants as cst
from postfix_validator.extra import utils
from postfix_validator.extra.types import Context


@utils.init_default_ctx
class ConverterRPN:
    def __init__(self, ctx: Context | None = None, logger: logging.Logger | None = None):
        self.ctx = ctx
        self.logger = logger or logging.getLogger(__name__)

    def rpn(self, tokens: list[str]) -> list[str]:
        """
        Converts list of infix tokens to RPN(postfix). Never raises: unbalanced grouping gives a best-effort result
        :param tokens: infix tokens
        :return: postfix tokens
        """
        op_map = self.ctx.operators
        output: list[str] = []
        stack_ops: list[str] = []  # list of operations

        for t in tokens:
            if t == cst.GROUP_OPEN:
                stack_ops.append(t)
            elif t == cst.GROUP_CLOSE:
                while stack_ops and stack_ops[-1] != cst.GROUP_OPEN:
                    output.append(stack_ops.pop())
                if stack_ops:
                    stack_ops.pop()
                else:
                    self.logger.warning("Unmatched ')' ignored")
            elif utils.is_operator(t, op_map):
                cur_priority = utils.precedence_of(t, op_map)
                # equal precedence pops too: left-to-right reduction
                while stack_ops and stack_ops[-1] != cst.GROUP_OPEN and utils.precedence_of(stack_ops[-1], op_map) >= cur_priority:
                    output.append(stack_ops.pop())
                stack_ops.append(t)
            else:
                output.append(t)

        if cst.GROUP_OPEN in stack_ops:
            self.logger.warning("Unmatched '(' flushed to output")
        for op in stack_ops[::-1]:
            output.append(op)

        self.logger.debug(f"{output=}")
        return output


def convert_infix_to_postfix(tokens: list[str], ctx: Context | None = None) -> list[str]:
    return ConverterRPN(ctx=ctx).rpn(tokens)
