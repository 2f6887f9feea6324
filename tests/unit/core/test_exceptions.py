"""Tests for the package exception and message codes."""

from wandermap.core.exceptions import WanderMapException
from wandermap.core.messages import MessageCode, get_default_message


class TestWanderMapException:
    def test_default_message(self):
        exc = WanderMapException(MessageCode.CLUSTER_NOT_FOUND)

        assert exc.message == "Cluster not found in the current map view"
        assert str(exc) == exc.message
        assert exc.status_code is None
        assert exc.details == {}

    def test_to_response_dict(self):
        exc = WanderMapException(
            MessageCode.EXTERNAL_SERVICE_ERROR,
            status_code=503,
            details={"endpoint": "/stories"},
        )

        assert exc.to_response_dict() == {
            "message_code": MessageCode.EXTERNAL_SERVICE_ERROR,
            "message": "Travel API request failed",
            "details": {"endpoint": "/stories"},
        }

    def test_custom_message(self):
        exc = WanderMapException(MessageCode.INVALID_INPUT, message="Zoom must be >= 0")
        assert exc.message == "Zoom must be >= 0"

    def test_every_code_has_a_message(self):
        for code in MessageCode:
            assert get_default_message(code) != "Unknown error"
