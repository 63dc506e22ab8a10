"""
Core HTTP client for the JustCMS public API.

Handles credentials, URL construction, the bearer auth header and translating
responses into parsed JSON or errors.
"""

import json
import logging
import os
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_BASE_URL = "https://api.justcms.co/public"
TOKEN_ENV_VAR = "JUSTCMS_TOKEN"
PROJECT_ENV_VAR = "JUSTCMS_PROJECT"

# Characters left as-is in the resource path; ";" joins multiple layout ids.
PATH_SAFE_CHARS = "/;:@!$&'()*+,=%~"


class JustCmsError(Exception):
    """Base error class for JustCMS client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ConfigurationError(JustCmsError):
    """The API token or project ID could not be resolved."""


class APIError(JustCmsError):
    """Non-2xx response. ``body`` is the response text exactly as received."""

    def __init__(self, status: int, body: str):
        super().__init__(f"JustCMS API error {status}: {body}")
        self.status = status
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result = super().to_dict()
        result["status"] = self.status
        return result


class DecodeError(JustCmsError, ValueError):
    """A response or value does not have the expected structure."""


class MissingElementError(DecodeError, IndexError):
    """A collection is shorter than a helper requires."""


def resolve_credentials(
    token: str | None = None,
    project_id: str | None = None,
    env: Mapping[str, str] | None = None,
) -> tuple[str, str]:
    """
    Resolve the API token and project ID.

    Explicit arguments win; empty or missing ones fall back to the
    JUSTCMS_TOKEN / JUSTCMS_PROJECT entries of ``env`` (``os.environ`` by
    default).

    Raises:
        ConfigurationError: If either value is still missing

    """
    source = os.environ if env is None else env
    resolved_token = token or source.get(TOKEN_ENV_VAR)
    resolved_project = project_id or source.get(PROJECT_ENV_VAR)

    if not resolved_token:
        raise ConfigurationError(f"JustCMS API token is required. Pass token= or set {TOKEN_ENV_VAR}")
    if not resolved_project:
        raise ConfigurationError(f"JustCMS project ID is required. Pass project_id= or set {PROJECT_ENV_VAR}")
    return resolved_token, resolved_project


class APIClient:
    """
    Low-level HTTP client for the JustCMS public API.

    Credentials are resolved once, at construction. The instance holds no
    other state, so it can be shared between threads.
    """

    def __init__(
        self,
        token: str | None = None,
        project_id: str | None = None,
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the API client.

        Args:
            token: JustCMS API token (or JUSTCMS_TOKEN in env)
            project_id: JustCMS project ID (or JUSTCMS_PROJECT in env)
            env: Fallback configuration source, defaults to os.environ
            timeout: Request timeout in seconds, None for the socket default

        Raises:
            ConfigurationError: If the token or project ID is missing

        """
        self.token, self.project_id = resolve_credentials(token, project_id, env)
        self.base_url = DEFAULT_BASE_URL
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"{type(self).__name__}(project_id={self.project_id!r})"

    def build_url(self, path: str = "", params: Mapping[str, Any] | None = None) -> str:
        """
        Build ``{base}/{project_id}[/{path}][?{query}]``.

        Parameters whose value is None are left out; everything else, falsy
        values included, is sent as ``str(value)``.
        """
        url = f"{self.base_url}/{self.project_id}"
        if path:
            url = f"{url}/{urllib.parse.quote(path, safe=PATH_SAFE_CHARS)}"

        if params:
            filtered_params = {k: _query_value(v) for k, v in params.items() if v is not None}
            if filtered_params:
                url = f"{url}?{urllib.parse.urlencode(filtered_params)}"
        return url

    def get(self, path: str = "", params: Mapping[str, Any] | None = None) -> Any:
        """
        Make a GET request and return the parsed JSON body.

        Args:
            path: Resource path relative to the project, "" for the root
            params: Query parameters, None values are dropped

        Returns:
            Parsed JSON response

        Raises:
            APIError: On a non-2xx response
            DecodeError: If the body is not valid JSON

        """
        url = self.build_url(path, params)
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/json",
        }

        logger.debug("GET %s", url)
        req = urllib.request.Request(url, headers=headers, method="GET")
        kwargs = {} if self.timeout is None else {"timeout": self.timeout}
        try:
            with urllib.request.urlopen(req, **kwargs) as response:
                response_data = response.read()
        except urllib.error.HTTPError as e:
            error_body = e.read().decode("utf-8", errors="replace")
            logger.debug("GET %s failed with status %s", url, e.code)
            raise APIError(e.code, error_body) from e

        try:
            return json.loads(response_data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodeError(f"Invalid JSON response: {e}", details={"url": url}) from e


def _query_value(value: Any) -> str:
    # Booleans go out as JSON literals rather than "True"/"False".
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
