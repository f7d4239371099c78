"""Infrastructure errors – transport and I/O failures."""

from __future__ import annotations

from typing import Any

from tglog.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not a configuration problem."""

    default_code = "infrastructure_error"


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class DeliveryError(ExternalServiceError):
    """A bot transport could not deliver a message to one chat.

    Never raised out of the delivery worker; it is built so the failure can
    be reported on the diagnostic log with a stable shape.
    """

    default_code = "delivery_failed"

    def __init__(
        self,
        chat_id: int | str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            "telegram",
            message or f"Could not deliver message to chat {chat_id!r}",
            **kwargs,
        )
        self.chat_id = chat_id

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["chat_id"] = self.chat_id
        if self.status_code is not None:
            base["status_code"] = self.status_code
        return base


__all__ = ["DeliveryError", "ExternalServiceError", "InfrastructureError"]
