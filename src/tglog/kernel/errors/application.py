"""Application-layer errors – problems the caller can act on."""

from __future__ import annotations

from tglog.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Caller-visible failure at use-case level (e.g. bad configuration)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
