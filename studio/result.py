from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")

_MISSING = object()


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Success-or-error value passed between request processing stages."""

    _value: object = _MISSING
    _error: object = _MISSING

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(_value=value)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(_error=error)

    @property
    def is_ok(self) -> bool:
        return self._error is _MISSING

    @property
    def is_err(self) -> bool:
        return not self.is_ok

    @property
    def value(self) -> T:
        if self.is_err:
            raise ValueError("Called value on Result.err")
        return self._value  # type: ignore[return-value]

    @property
    def error(self) -> E:
        if self.is_ok:
            raise ValueError("Called error on Result.ok")
        return self._error  # type: ignore[return-value]
