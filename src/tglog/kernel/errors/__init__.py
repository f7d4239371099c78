"""Kernel errors – the tglog error hierarchy.

Hierarchy::

    BaseError
    ├── ApplicationError         (application.py)
    │   └── ConfigError          (tglog.config.validation)
    └── InfrastructureError      (infrastructure.py)
        └── ExternalServiceError
            └── DeliveryError
"""

from tglog.kernel.errors.application import ApplicationError
from tglog.kernel.errors.base import BaseError
from tglog.kernel.errors.infrastructure import (
    DeliveryError,
    ExternalServiceError,
    InfrastructureError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DeliveryError",
    "ExternalServiceError",
    "InfrastructureError",
]
