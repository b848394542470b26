# ABOUTME: Reservability lookup for catalog items, keyed by local id.
# ABOUTME: Defines the AvailabilityProvider protocol and a batch HTTP client for it.

import logging
import time
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

# Statuses worth repeating the batch request for.
_TRANSIENT_STATUSES = frozenset({429, 502, 503, 504})


class AvailabilityFetchError(Exception):
    """Raised when the availability service cannot answer a reservability query."""


@runtime_checkable
class AvailabilityProvider(Protocol):
    """Protocol for batch reservability lookups.

    Returns a mapping from each requested local id to whether a patron can
    currently place a reservation on it.
    """

    def is_reservable(self, local_ids: Iterable[str]) -> dict[str, bool]: ...


class HttpAvailabilityProvider:
    """Availability provider backed by a remote JSON endpoint.

    Each batch is one GET with the ids comma-separated in the `ids` query
    parameter. The endpoint answers with a JSON object mapping local id to a
    JSON boolean; ids it leaves out are reported as not reservable. Gateway
    errors, rate limiting and dropped connections are retried a few times
    with a growing pause.

    The provider owns its httpx client: call close() or use it as a context
    manager.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        attempts: int = 3,
        backoff: float = 0.5,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        self._endpoint = endpoint
        self._attempts = attempts
        self._backoff = backoff
        self._client = httpx.Client(
            headers={"User-Agent": "shelfmark/0.1.0", "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "HttpAvailabilityProvider":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def is_reservable(self, local_ids: Iterable[str]) -> dict[str, bool]:
        """Look up reservability for all local_ids in a single request.

        Raises:
            AvailabilityFetchError: If the service cannot be reached, answers
                with an error status, or sends anything other than a JSON
                object of booleans.
        """
        ids = list(dict.fromkeys(local_ids))
        if not ids:
            return {}

        response = self._fetch(ids)
        try:
            payload = response.json()
        except ValueError as exc:
            raise AvailabilityFetchError(
                f"Availability service returned invalid JSON for {len(ids)} id(s)"
            ) from exc
        return self._parse(ids, payload)

    def _fetch(self, ids: list[str]) -> httpx.Response:
        params = {"ids": ",".join(ids)}
        problem = ""
        for attempt in range(1, self._attempts + 1):
            try:
                response = self._client.get(self._endpoint, params=params)
            except httpx.TransportError as exc:
                problem = f"connection error ({exc})"
            else:
                if response.status_code == 200:
                    return response
                if response.status_code not in _TRANSIENT_STATUSES:
                    raise AvailabilityFetchError(
                        f"Availability service answered HTTP {response.status_code}"
                    )
                problem = f"HTTP {response.status_code}"

            if attempt < self._attempts:
                pause = self._backoff * attempt
                logger.warning(
                    "Reservability lookup for %d id(s) got %s; retry %d of %d in %.1fs",
                    len(ids),
                    problem,
                    attempt,
                    self._attempts - 1,
                    pause,
                )
                time.sleep(pause)

        raise AvailabilityFetchError(
            f"Availability service unavailable after {self._attempts} attempt(s): {problem}"
        )

    def _parse(self, ids: list[str], payload: Any) -> dict[str, bool]:
        if not isinstance(payload, dict):
            raise AvailabilityFetchError(
                f"Expected a JSON object from {self._endpoint}, got {type(payload).__name__}"
            )

        result: dict[str, bool] = {}
        missing = []
        for local_id in ids:
            if local_id not in payload:
                missing.append(local_id)
                result[local_id] = False
                continue
            value = payload[local_id]
            # JSON true/false only; "false", 0 and null are rejected
            if not isinstance(value, bool):
                raise AvailabilityFetchError(
                    f"Reservability of {local_id} is {value!r}, expected true or false"
                )
            result[local_id] = value

        if missing:
            logger.debug("Availability service did not report %d id(s): %s", len(missing), missing)
        return result
