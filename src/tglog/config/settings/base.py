"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from tglog.config.validation import ConfigError, MissingRequiredSettingError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses set ``_prefix``; each field is read from ``<PREFIX>_<FIELD>``
    and checked in :meth:`_validate` on construction.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def required_fields(cls) -> list[str]:
        return [
            f.name
            for f in dataclasses.fields(cls)
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        ]

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> Self:
        """Construct from merged field values.

        Raises
        ------
        MissingRequiredSettingError
            Named by the environment key of the first absent required field.
        ConfigError
            When the values do not fit the dataclass or fail validation.
        """
        for name in cls.required_fields():
            if name not in values:
                raise MissingRequiredSettingError(cls.env_key(name))
        try:
            return cls(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Cannot build {cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["Settings"]
