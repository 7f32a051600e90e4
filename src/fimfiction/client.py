"""Application client: client-credential authorization and authenticated GETs."""

from __future__ import annotations

import logging
import os
from typing import Any, Optional, TypedDict
from urllib.parse import urljoin

import requests
from typing_extensions import ReadOnly

from .errors import AuthorizationError
from .resources.endpoints import (
    BlogPosts,
    Bookshelves,
    Chapters,
    Groups,
    PrivateMessages,
    Stories,
    Users,
)

DEFAULT_API_URL = os.environ.get("FIMFICTION_API_URL", "https://www.fimfiction.net/api/v2/")
USER_AGENT = os.environ.get("FIMFICTION_USER_AGENT", "python-fimfiction-api")


class TokenResponse(TypedDict, total=False):
    """Readonly dict returned by the token endpoint."""
    access_token: ReadOnly[str]
    token_type: ReadOnly[str]


class Application:
    """Client for the Fimfiction API, acting on behalf of an application.

    See https://www.fimfiction.net/developers/api/v2/docs/applications
    """

    blog_posts: BlogPosts
    bookshelves: Bookshelves
    chapters: Chapters
    groups: Groups
    private_messages: PrivateMessages
    stories: Stories
    users: Users

    def __init__(
        self,
        auth_header: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        default_timeout: int = 20,
        session: Optional[requests.Session] = None,
        raise_on_error: bool = False,
    ) -> None:
        """Create an application client.

        Parameters
        ----------
        auth_header
            Value of the Authorization header, e.g. ``"Bearer <token>"``.
            Usually set by :meth:`authorize`.
        base_url
            API root. Defaults to ``FIMFICTION_API_URL``.
        default_timeout
            Default request timeout in seconds.
        session
            Optional requests session to reuse connections.
        raise_on_error
            If True, raise HTTP errors instead of returning None.
        """
        self.auth_header = auth_header
        self.base_url = base_url or DEFAULT_API_URL
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        self.default_timeout = default_timeout
        self.raise_on_error = raise_on_error
        self._logger = logging.getLogger(__name__)
        self._session = session

        self.blog_posts = BlogPosts(self)
        self.bookshelves = Bookshelves(self)
        self.chapters = Chapters(self)
        self.groups = Groups(self)
        self.private_messages = PrivateMessages(self)
        self.stories = Stories(self)
        self.users = Users(self)

    @classmethod
    def authorize_from_client_credentials(
        cls,
        client_id: str,
        client_secret: str,
        **kwargs: Any,
    ) -> "Application":
        """Create a client and authorize it with application credentials.

        See https://www.fimfiction.net/developers/api/v2/docs/oauth
        """
        application = cls(**kwargs)
        application.authorize(client_id, client_secret)
        return application

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Application":
        """Authorize with ``FIMFICTION_CLIENT_ID`` / ``FIMFICTION_CLIENT_SECRET``."""
        client_id = os.environ.get("FIMFICTION_CLIENT_ID")
        client_secret = os.environ.get("FIMFICTION_CLIENT_SECRET")
        if not client_id or not client_secret:
            raise AuthorizationError("FIMFICTION_CLIENT_ID and FIMFICTION_CLIENT_SECRET must be set")
        return cls.authorize_from_client_credentials(client_id, client_secret, **kwargs)

    def endpoint(self, tail: str) -> str:
        """Build the full URL to the given endpoint."""
        return urljoin(self.base_url, tail.lstrip("/"))

    def authorize(self, client_id: str, client_secret: str, *, timeout: Optional[int] = None) -> None:
        """Exchange client credentials for an access token.

        Raises
        ------
        requests.RequestException
            If the token request fails.
        AuthorizationError
            If the token response lacks ``access_token`` or ``token_type``.
        """
        requester = self._session or requests
        response = requester.post(
            self.endpoint("token"),
            data={
                "client_id": client_id,
                "client_secret": client_secret,
                "grant_type": "client_credentials",
            },
            headers={"User-Agent": USER_AGENT},
            timeout=timeout or self.default_timeout,
        )
        self._logger.debug("Authorization response: %s", response)
        response.raise_for_status()
        try:
            token: TokenResponse = response.json()
        except ValueError as exc:
            raise AuthorizationError("Token response was not JSON") from exc
        if not isinstance(token, dict) or not token.get("access_token") or not token.get("token_type"):
            raise AuthorizationError("Token response missing access_token or token_type")
        self.auth_header = f"{token['token_type']} {token['access_token']}"
        self._logger.debug("Authorized with %s token", token["token_type"])

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        """Send an authenticated request to the API.

        Parameters
        ----------
        method
            HTTP method. Only GET is used by the endpoint groups.
        path
            Endpoint path relative to the API root.
        params
            Query parameters for the request.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        dict | list | None
            Parsed JSON payload, or None if the response is empty or non-JSON.
        """
        url = self.endpoint(path)
        headers = {"User-Agent": USER_AGENT}
        if self.auth_header:
            headers["Authorization"] = self.auth_header

        requester = self._session or requests
        try:
            response = requester.request(
                method,
                url,
                params=params,
                headers=headers,
                timeout=timeout or self.default_timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            if self.raise_on_error:
                raise
            # Extract error message from response body if available
            error_msg = str(exc)
            try:
                error_body = response.json()
                if isinstance(error_body, dict):
                    errors = error_body.get("errors")
                    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
                        first = errors[0]
                        error_msg = f"{exc}\nServer error: {first.get('detail') or first.get('title')}"
                    elif "error" in error_body:
                        error_msg = f"{exc}\nServer error: {error_body['error']}"
            except (ValueError, AttributeError, KeyError):
                pass  # Response wasn't JSON or didn't have expected fields
            self._logger.warning("Request failed for %s %s: %s", method, url, error_msg)
            return None
        except requests.RequestException as exc:
            if self.raise_on_error:
                raise
            self._logger.warning("Request failed for %s %s: %s", method, url, exc)
            return None

        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError:
            self._logger.warning("Response from %s %s was not JSON", method, url)
            return None
        if isinstance(payload, (dict, list)):
            return payload
        return None
