from typing import Literal


class InvalidOperatorError(Exception):
    def __init__(self, message, exc_type: Literal["duplicate", "precedence", "symbol"]):
        super().__init__(message)
        self.exc_type = exc_type


class UnknownShortcutError(Exception):
    def __init__(self, message, shortcut: str):
        super().__init__(message)
        self.shortcut = shortcut
