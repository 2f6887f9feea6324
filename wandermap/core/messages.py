"""Centralized message codes and default messages."""

from enum import Enum


class MessageCode(str, Enum):
    """Message codes carried by package exceptions."""

    # Remote travel API
    UNAUTHORIZED = "UNAUTHORIZED"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    EXTERNAL_SERVICE_TIMEOUT = "EXTERNAL_SERVICE_TIMEOUT"
    INVALID_RESPONSE = "INVALID_RESPONSE"

    # Map view
    CLUSTER_NOT_FOUND = "CLUSTER_NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"


DEFAULT_MESSAGES: dict[MessageCode, str] = {
    MessageCode.UNAUTHORIZED: "Authentication with the travel API failed",
    MessageCode.EXTERNAL_SERVICE_ERROR: "Travel API request failed",
    MessageCode.EXTERNAL_SERVICE_TIMEOUT: "Travel API request timed out",
    MessageCode.INVALID_RESPONSE: "Travel API returned an invalid response",
    MessageCode.CLUSTER_NOT_FOUND: "Cluster not found in the current map view",
    MessageCode.INVALID_INPUT: "Invalid input provided",
}


def get_default_message(code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(code, "Unknown error")
