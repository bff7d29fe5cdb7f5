"""
Error types raised by the AEM client and resource operations.

Every error carries a message that can be shown to the user as is.
HTTP errors additionally carry the status code of the failed response.
"""

import json


class AemError(Exception):
    """Base class for all errors reported by the CLI."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class NotConfigured(AemError):
    """Username or password missing from the configuration."""

    def __init__(self, message=None):
        super().__init__(
            message
            or "AEM credentials not configured. Run: adobe config set --username admin --password admin"
        )


class Unreachable(AemError):
    """The request was sent but no response came back."""

    def __init__(self, base_url):
        super().__init__(
            f"No response from AEM at {base_url}. Is your AEM instance running?"
        )
        self.base_url = base_url


class HttpError(AemError):
    """The server answered with a non-success status."""

    status_code = None

    def __init__(self, message, status_code=None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class AuthenticationFailed(HttpError):
    status_code = 401

    def __init__(self):
        super().__init__("Authentication failed. Check your AEM credentials.")


class Forbidden(HttpError):
    status_code = 403

    def __init__(self):
        super().__init__("Access forbidden. Check your AEM user permissions.")


class NotFound(HttpError):
    status_code = 404

    def __init__(self):
        super().__init__("Resource not found in AEM.")


class ServerError(HttpError):
    status_code = 500

    def __init__(self):
        super().__init__("AEM server error. Check your AEM instance.")


class ApiError(HttpError):
    """Any other failed status; the message comes from the response body."""

    def __init__(self, status_code, body):
        super().__init__(
            f"API Error ({status_code}): {extract_message(body)}", status_code
        )
        self.body = body


class UnexpectedResponse(HttpError):
    """A successful status whose body is not a JSON node.

    Sling answers ``300 Multiple Choices`` with a list of narrower URLs
    when a ``.infinity.json`` tree is too large to render.
    """

    def __init__(self, status_code, body):
        if status_code == 300:
            message = (
                "The repository tree is too large for AEM to render. "
                "Try a deeper path."
            )
        else:
            message = f"Unexpected response from AEM ({status_code}): not a JSON object."
        super().__init__(message, status_code)
        self.body = body


STATUS_ERRORS = {
    401: AuthenticationFailed,
    403: Forbidden,
    404: NotFound,
    500: ServerError,
}


def extract_message(body):
    """Pick the most specific message out of an error response body.

    Looks at ``error.message`` first, then ``message``, and falls back to
    the whole body serialized as JSON.
    """
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        if body.get("message"):
            return body["message"]
    return json.dumps(body)


def error_for_response(response):
    """Build the error matching a failed ``requests.Response``."""
    error_class = STATUS_ERRORS.get(response.status_code)
    if error_class is not None:
        return error_class()

    try:
        body = response.json()
    except ValueError:
        body = response.text
    return ApiError(response.status_code, body)
