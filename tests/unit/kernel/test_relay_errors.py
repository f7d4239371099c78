"""Unit tests for the error hierarchy."""
from __future__ import annotations

from tglog.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from tglog.kernel.errors import (
    ApplicationError,
    BaseError,
    DeliveryError,
    ExternalServiceError,
    InfrastructureError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        assert BaseError("x").code == "base_error"

    def test_str_is_message(self) -> None:
        err = BaseError("boom", detail={"k": 1})
        assert str(err) == "boom"
        assert err.to_dict() == {"code": "base_error", "message": "boom", "detail": {"k": 1}}

    def test_cause_chained(self) -> None:
        cause = ValueError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == repr(cause)


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_missing_required_message(self) -> None:
        err = MissingRequiredSettingError("chat_ids")
        assert err.code == "missing_required_setting"
        assert "chat_ids" in err.message

    def test_invalid_value_fields(self) -> None:
        err = InvalidSettingValueError("queue_size", 0, "must be positive")
        assert (err.setting_name, err.value, err.reason) == ("queue_size", 0, "must be positive")
        assert "must be positive" in err.message


class TestDeliveryError:
    def test_hierarchy(self) -> None:
        err = DeliveryError(42)
        assert isinstance(err, ExternalServiceError)
        assert isinstance(err, InfrastructureError)
        assert err.service == "telegram"

    def test_default_message_mentions_chat(self) -> None:
        assert "42" in DeliveryError(42).message

    def test_to_dict(self) -> None:
        d = DeliveryError("@ops", "Forbidden", status_code=403).to_dict()
        assert d["chat_id"] == "@ops"
        assert d["status_code"] == 403
        assert d["code"] == "delivery_failed"
        assert d["message"] == "Forbidden"

    def test_status_code_omitted_when_unknown(self) -> None:
        assert "status_code" not in DeliveryError(1).to_dict()
