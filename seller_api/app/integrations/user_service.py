"""UserService client.

The seller service asks the UserService for the current list of
superusers on every company mutation so that superusers are always
managers of every company.  The dependency is advisory: company
mutation must keep working when the UserService is down.  That is why
the client offers :meth:`UserServiceClient.fetch_superusers_with_graceful_degradation`,
which turns every transport or protocol failure into
:class:`ServiceDegradedError` and lets the caller proceed without the
list.

Endpoint used::

    GET {base_url}/internal/users/superusers
    200 {"super_user_ids": [1, 2, 3]}
    404 superusers not found
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests


logger = logging.getLogger(__name__)

SUPERUSERS_PATH = "/internal/users/superusers"
DEFAULT_TIMEOUT = 10.0


class UserServiceError(Exception):
    """Base class for UserService client failures."""


class SuperusersNotFoundError(UserServiceError):
    """The UserService answered 404 for the superuser list."""

    def __init__(self) -> None:
        super().__init__("superusers not found")


class InvalidResponseError(UserServiceError):
    """Unexpected status code or a body that is not a superuser list."""


class ServiceDegradedError(UserServiceError):
    """The UserService is unavailable; continue without superusers.

    The original failure is available as ``__cause__``.
    """

    def __init__(self, message: str = "userservice unavailable: graceful degradation applied") -> None:
        super().__init__(message)


class UserServiceClient:
    """Synchronous HTTP client for the UserService."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_superusers(self) -> List[int]:
        """Return the IDs of all superusers.

        Raises
        ------
        SuperusersNotFoundError
            The UserService responded with 404.
        InvalidResponseError
            Any other non-200 status, or a malformed body.
        UserServiceError
            The request could not be performed (connection error,
            timeout, ...).
        """
        url = f"{self.base_url}{SUPERUSERS_PATH}"
        logger.debug("Sending GET request to %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise UserServiceError(f"failed to execute request: {exc}") from exc

        if response.status_code == 404:
            raise SuperusersNotFoundError()
        if response.status_code != 200:
            raise InvalidResponseError(
                f"unexpected status code {response.status_code}: {response.text}"
            )

        try:
            payload: Any = response.json()
        except ValueError as exc:
            raise InvalidResponseError(f"failed to decode response: {exc}") from exc
        return self._parse_superuser_ids(payload)

    @staticmethod
    def _parse_superuser_ids(payload: Any) -> List[int]:
        if not isinstance(payload, dict):
            raise InvalidResponseError("response body is not a JSON object")
        ids = payload.get("super_user_ids")
        if ids is None:
            # Go-style services encode an empty slice as null.
            return []
        if not isinstance(ids, list) or not all(
            isinstance(i, int) and not isinstance(i, bool) for i in ids
        ):
            raise InvalidResponseError("super_user_ids must be a list of integers")
        return ids

    def fetch_superusers_with_graceful_degradation(self) -> List[int]:
        """Fetch superusers, degrading on unavailability.

        ``SuperusersNotFoundError`` is re-raised unchanged so callers can
        tell a confirmed absence from an outage.  Every other failure
        is converted into ``ServiceDegradedError`` chained to the
        original exception.
        """
        logger.info("Fetching superusers list from UserService")
        try:
            superusers = self.fetch_superusers()
        except SuperusersNotFoundError:
            logger.warning("Superusers not found in UserService")
            raise
        except UserServiceError as exc:
            logger.error("UserService unavailable, applying graceful degradation: %s", exc)
            raise ServiceDegradedError(f"userservice unavailable: {exc}") from exc

        logger.info("Successfully fetched %d superusers from UserService", len(superusers))
        return superusers
