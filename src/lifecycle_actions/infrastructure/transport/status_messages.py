"""User-facing messages for failed response statuses."""

STATUS_MESSAGES = {
    401: "Session expired, please reload the page.",
    403: "Authorization error, please reload the page or try to logout/login again.",
    404: "The requested resource was not found.",
}

SERVER_ERROR_MESSAGE = "Server error, please check log files."


def error_message_by_status(status: int) -> str:
    """Message shown to the user for a failed HTTP status."""
    if status in STATUS_MESSAGES:
        return STATUS_MESSAGES[status]
    if status >= 500:
        return SERVER_ERROR_MESSAGE
    return f"Unexpected response from the server (HTTP {status})."
