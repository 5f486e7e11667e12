import inspect
from functools import wraps
from typing import Mapping

import postfix_validator.constants as cst
from postfix_validator.extra.types import Context, Operator


def is_operator(token: str, op_map: Mapping[str, Operator]) -> bool:
    return token in op_map


def precedence_of(token: str, op_map: Mapping[str, Operator]) -> int:
    """
    Gets precedence of the operator
    :param token: token to look up
    :param op_map: map from operator symbol to Operator dataclass
    :return: precedence of operator or UNKNOWN_PRECEDENCE(lower than any real one) for other tokens
    """
    op = op_map.get(token)
    if op is None:
        return cst.UNKNOWN_PRECEDENCE
    return op.precedence


def description_of(token: str, op_map: Mapping[str, Operator]) -> str | None:
    op = op_map.get(token)
    return op.description if op else None


def log_exception(func):

    """Decorator to automatically log exceptions"""

    @wraps(func)
    def wrapper(self, *args, **kwargs):

        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            self.logger.exception(f"Exception in {func.__name__}: {e}")
            raise

    return wrapper


def init_default_ctx(cls):
    """
    Fills every Context-annotated argument of __init__ that was not passed(or passed as None) with a default Context
    """

    init_original = cls.__init__
    signature = inspect.signature(init_original)

    @wraps(init_original)
    def new_init(*args, **kwargs):
        bound = signature.bind_partial(*args, **kwargs)
        for k, v in signature.parameters.items():
            if v.annotation is Context or v.annotation == Context | None:
                if bound.arguments.get(k) is None:
                    bound.arguments[k] = Context()
        return init_original(*bound.args, **bound.kwargs)
    cls.__init__ = new_init
    return cls


class CallAllMethods:
    """
    Calls every check method of the object(methods starting with '_check')
    """
    def call_all_methods(self, instance = None):
        if not instance:
            instance = self
        for method in dir(instance):
            attr = getattr(instance, method)
            if method.startswith("_check") and callable(attr):
                attr()
