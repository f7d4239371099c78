"""Kernel types – Result monad."""
from tglog.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
