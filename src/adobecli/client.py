"""
HTTP access to an AEM instance.

``AemClient`` binds a ``requests.Session`` to the configured base URL and
Basic Auth credentials. Every request goes through ``AemClient.request``,
which turns transport failures and error statuses into ``AemError``
subclasses so callers only ever deal with one family of exceptions.
"""

import logging

import requests
from requests.auth import HTTPBasicAuth

from .config import DEFAULT_BASE_URL
from .errors import NotConfigured, UnexpectedResponse, Unreachable, error_for_response

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class AemClient:
    """Authenticated session against one AEM instance."""

    def __init__(self, base_url, username, password):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.session = requests.Session()
        self.session.auth = HTTPBasicAuth(username, password)
        self.session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

    def url(self, path):
        return f"{self.base_url}{path}"

    def request(self, method, path, **kwargs):
        """Send a request and return the response, raising on failure."""
        url = self.url(path)
        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(method, url, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise Unreachable(self.base_url) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        if not response.ok:
            raise error_for_response(response)
        return response

    def get_node(self, path):
        """Fetch a JSON node, rejecting any body that is not an object."""
        response = self.request("GET", path)
        body = parse_body(response)
        if not isinstance(body, dict):
            raise UnexpectedResponse(response.status_code, body)
        return body

    def post_form(self, path, data):
        return parse_body(
            self.request(
                "POST", path, data=data, headers={"Content-Type": FORM_CONTENT_TYPE}
            )
        )

    def post_multipart(self, path, files, data=None):
        # Dropping the session's Content-Type lets requests set the boundary
        return parse_body(
            self.request(
                "POST",
                path,
                files=files,
                data=data,
                headers={"Content-Type": None, "Accept": "application/json"},
            )
        )

    def delete(self, path):
        self.request("DELETE", path, headers={"Content-Type": FORM_CONTENT_TYPE})

    def close(self):
        self.session.close()


def parse_body(response):
    """Decode a JSON response body, falling back to plain text."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def build_client(store):
    """Create an ``AemClient`` from the stored configuration.

    Raises:
        NotConfigured: if the username or the password is missing.
    """
    username = store.get("username")
    password = store.get("password")
    if not username or not password:
        raise NotConfigured()

    return AemClient(store.base_url, username, password)
