"""Config settings – SettingsFactory."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from tglog.config.settings.base import Settings
from tglog.config.settings.loaders import SettingsLoader

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Layer several sources into one settings object.

    Later loaders win over earlier ones and *overrides* win over every
    loader.  Required fields only have to appear in one layer.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] = (),
        overrides: Mapping[str, Any] | None = None,
    ) -> T:
        merged: dict[str, Any] = {}
        for loader in loaders:
            merged.update(loader.values(settings_cls))
        merged.update(overrides or {})
        return settings_cls.from_values(merged)


__all__ = ["SettingsFactory"]
