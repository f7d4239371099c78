"""Kernel types – ``Ok`` / ``Err`` for outcomes the caller is expected to branch on.

Building a relay from incomplete configuration is such an outcome: the
builder returns ``Err(ConfigError)`` from ``try_build`` and only raises from
``build``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"unwrap_err() on {self!r}")

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        return Ok(func(self.value))


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure carrying the exception that describes it; ``unwrap`` raises it."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, func: Callable[..., object]) -> Err[E]:  # noqa: ARG002
        return self


type Result[T, E] = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
