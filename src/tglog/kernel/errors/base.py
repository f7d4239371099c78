"""Kernel errors – BaseError, the root of every error tglog raises or reports."""
from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Error with a stable ``code`` slug and structured context.

    :meth:`to_dict` is shaped for structlog keyword fields, so a failure can
    be logged as ``log.warning(event, **error.to_dict())``.
    """

    default_code = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"

    def to_dict(self) -> dict[str, Any]:
        fields: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            fields["detail"] = self.detail
        if self.__cause__ is not None:
            fields["cause"] = repr(self.__cause__)
        return fields


__all__ = ["BaseError"]
