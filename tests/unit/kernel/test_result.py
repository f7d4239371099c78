"""Unit tests for the Result type."""
from __future__ import annotations

import pytest

from tglog.config.validation import ConfigError
from tglog.kernel.types import Err, Ok


class TestOk:
    def test_unwrap(self) -> None:
        ok = Ok(3)
        assert ok.is_ok() and not ok.is_err()
        assert ok.unwrap() == 3
        assert ok.unwrap_or(9) == 3

    def test_map(self) -> None:
        assert Ok(2).map(lambda v: v * 10) == Ok(20)

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError):
            Ok(1).unwrap_err()


class TestErr:
    def test_unwrap_raises_the_error(self) -> None:
        err = Err(ConfigError("bad"))
        with pytest.raises(ConfigError, match="bad"):
            err.unwrap()

    def test_accessors(self) -> None:
        error = ConfigError("bad")
        err = Err(error)
        assert err.is_err() and not err.is_ok()
        assert err.error is error
        assert err.unwrap_err() is error
        assert err.unwrap_or(5) == 5

    def test_map_is_noop(self) -> None:
        err = Err(ConfigError("bad"))
        assert err.map(lambda v: v) is err
