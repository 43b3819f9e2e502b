"""Tests for domain error types and describe_error helper."""

import pytest

from servicelog.core.domain.errors import (
    ConfigurationError,
    ServiceLogError,
    describe_error,
)


class TestServiceLogError:
    """Tests for ServiceLogError base exception."""

    def test_create_basic(self) -> None:
        err = ServiceLogError(message="Something failed")
        assert err.message == "Something failed"
        assert err.code == "servicelog_error"
        assert err.details == {}

    def test_is_exception(self) -> None:
        err = ServiceLogError(message="test")
        assert isinstance(err, Exception)

    def test_str_representation(self) -> None:
        err = ServiceLogError(message="Something broke")
        assert str(err) == "Something broke"


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_code_and_details(self) -> None:
        err = ConfigurationError("bad level", details={"field": "level"})
        assert err.code == "config_error"
        assert err.details == {"field": "level"}
        assert str(err) == "bad level"

    def test_inherits_base(self) -> None:
        err = ConfigurationError("bad")
        assert isinstance(err, ServiceLogError)
        assert err.details == {}

    def test_can_be_raised_and_caught_as_base(self) -> None:
        with pytest.raises(ServiceLogError):
            raise ConfigurationError("bad")


class TestDescribeError:
    """Tests for describe_error."""

    def test_type_and_message(self) -> None:
        assert describe_error(Exception("error")) == "Exception: error"
        assert describe_error(ValueError("boom")) == "ValueError: boom"

    def test_empty_message(self) -> None:
        assert describe_error(RuntimeError()) == "RuntimeError"

    def test_custom_exception(self) -> None:
        class PaymentDeclined(Exception):
            pass

        assert describe_error(PaymentDeclined("card expired")) == "PaymentDeclined: card expired"
