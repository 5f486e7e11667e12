from collections import deque
from typing import Iterator

import postfix_validator.constants as cst
from postfix_validator.extra.types import ValidationResult


class ValidationHistory:
    """
    Most-recent-first history of validation results. The oldest result is evicted when full
    :param size: maximum number of results kept
    """
    def __init__(self, size: int = cst.HISTORY_SIZE):
        self.size = size
        self._results: deque[ValidationResult] = deque(maxlen=size)

    def add(self, result: ValidationResult) -> None:
        self._results.appendleft(result)

    def clear(self) -> None:
        self._results.clear()

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[ValidationResult]:
        return iter(self._results)

    def __getitem__(self, index: int) -> ValidationResult:
        return self._results[index]
