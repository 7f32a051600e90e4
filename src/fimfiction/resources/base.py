"""Base endpoint helpers."""

from __future__ import annotations

from typing import Any, Optional, TYPE_CHECKING

from ._common_types import ValidationMode
from .response_types import ApiResponse, decode_response
from .union import AnyResource

if TYPE_CHECKING:  # pragma: no cover
    from ..client import Application


class Endpoint:
    """Shared helpers for endpoint groups.

    Subclasses set ``path`` (collection path under the API root) and
    ``data_type`` (the resource class the endpoint returns as ``data``).
    """

    path: str = ""
    data_type: Any = AnyResource

    def __init__(self, client: "Application") -> None:
        self._client = client

    @property
    def _logger(self):
        return self._client._logger

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._client.request(method, path, params=params, timeout=timeout)

    def _get(
        self,
        path: str,
        *,
        params: Optional[dict[str, Any] | list[tuple[str, Any]]] = None,
        timeout: Optional[int] = None,
    ) -> Optional[dict[str, Any] | list[Any]]:
        return self._request("GET", path, params=params, timeout=timeout)

    def get(
        self,
        resource_id: int,
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
    ) -> ApiResponse[Any] | None:
        """Fetch one resource by id and decode the response.

        Parameters
        ----------
        resource_id
            Numeric resource identifier.
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.

        Returns
        -------
        ApiResponse or None
            Decoded response, or ``None`` when the request failed.

        Raises
        ------
        DecodeError
            If the response does not match the resource schema.
        """
        if validation != "off" and (
            not isinstance(resource_id, int) or isinstance(resource_id, bool) or resource_id < 0
        ):
            if validation == "strict":
                raise ValueError(f"Invalid resource_id: {resource_id}")
            self._logger.warning("Invalid resource_id for %s: %s", self.path, resource_id)
            return None

        response = self._get(f"{self.path}/{resource_id}", timeout=timeout)
        if not isinstance(response, dict):
            return None
        return decode_response(response, self.data_type)
