"""Config settings – sources of raw setting values."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from collections.abc import Mapping
from typing import Any, TypeVar

from tglog.config.settings.base import Settings
from tglog.config.validation import InvalidSettingValueError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def _coerce(raw: str, hint: Any) -> Any:
    if hint is bool:
        flag = raw.strip().lower()
        if flag not in _TRUE | _FALSE:
            raise ValueError(f"not a boolean: {raw!r}")
        return flag in _TRUE
    if hint is int or hint is float:
        return hint(raw)
    if typing.get_origin(hint) is list:
        # comma-separated, blanks dropped
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw


class SettingsLoader(abc.ABC):
    """A source of setting values; only the fields it knows are returned."""

    @abc.abstractmethod
    def values(self, settings_class: type[Settings]) -> dict[str, Any]: ...

    def load(self, settings_class: type[T]) -> T:
        """Build *settings_class* from this source alone."""
        return settings_class.from_values(self.values(settings_class))


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` keys from *environ* (``os.environ`` by default)."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        hints = typing.get_type_hints(settings_class)
        found: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            if key not in environ:
                continue
            raw = environ[key]
            try:
                found[field.name] = _coerce(raw, hints.get(field.name, str))
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc
        return found


class DotenvSettingsLoader(SettingsLoader):
    """Read the same keys from a ``.env`` file without touching ``os.environ``."""

    def __init__(self, env_file: str = ".env") -> None:
        self._env_file = env_file

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        try:
            from dotenv import dotenv_values
        except ImportError as exc:
            raise ImportError("Install 'tglog[dotenv]' to use DotenvSettingsLoader") from exc
        entries = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        return EnvSettingsLoader(entries).values(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
