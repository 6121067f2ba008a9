"""Tests for nsoap.errors — exception hierarchy and routing error values."""

import pytest

from nsoap.errors import (
    ConfigurationError,
    NsoapError,
    PathDecodeError,
    RoutingError,
    RoutingErrorType,
)


class TestHierarchy:
    def test_configuration_error_is_nsoap_error(self) -> None:
        assert issubclass(ConfigurationError, NsoapError)

    def test_path_decode_error_is_value_error(self) -> None:
        assert issubclass(PathDecodeError, NsoapError)
        assert issubclass(PathDecodeError, ValueError)

    def test_routing_error_is_not_an_exception(self) -> None:
        assert not issubclass(RoutingError, BaseException)


class TestPathDecodeError:
    def test_message_includes_path(self) -> None:
        err = PathDecodeError("a(%FF)", "invalid start byte")
        assert err.path == "a(%FF)"
        assert "a(%FF)" in str(err)
        assert "invalid start byte" in str(err)

    def test_without_reason(self) -> None:
        assert str(PathDecodeError("x")) == "Malformed percent-encoding in 'x'"


class TestRoutingError:
    def test_not_found(self) -> None:
        err = RoutingError.not_found()
        assert err.type is RoutingErrorType.NOT_FOUND
        assert err.message == "The requested path was not found."
        assert err.status == 404

    def test_not_a_function(self) -> None:
        err = RoutingError.not_a_function("users.name", "bob")
        assert err.type == "NOT_A_FUNCTION"
        assert err.message == "users.name is not a function. Was str."
        assert err.status == 400

    def test_type_names(self) -> None:
        assert RoutingError.not_a_function("a", 1.5).message.endswith("Was float.")
        assert RoutingError.not_a_function("a", {}).message.endswith("Was dict.")

    def test_str(self) -> None:
        assert str(RoutingError.not_found()) == "NOT_FOUND: The requested path was not found."

    def test_frozen(self) -> None:
        err = RoutingError.not_found()
        with pytest.raises(AttributeError):
            err.message = "changed"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert RoutingError.not_found() == RoutingError.not_found()
