# ABOUTME: Unit tests for the HTTP availability provider.
# ABOUTME: Verifies batching into one request, retries, response validation and cleanup.

import httpx
import pytest

from shelfmark.availability import (
    AvailabilityFetchError,
    AvailabilityProvider,
    HttpAvailabilityProvider,
)
from shelfmark.db.catalog import CatalogStore
from tests.fixtures.fake_http import FakeTransport

ENDPOINT = "https://availability.example.org/reservable"


def _provider(transport: httpx.BaseTransport, **kwargs) -> HttpAvailabilityProvider:
    return HttpAvailabilityProvider(ENDPOINT, backoff=0.01, transport=transport, **kwargs)


class TestProtocol:
    """Both shipped providers satisfy AvailabilityProvider."""

    def test_http_provider(self) -> None:
        """The HTTP provider is an AvailabilityProvider."""
        assert isinstance(_provider(FakeTransport()), AvailabilityProvider)

    def test_catalog_store(self, store: CatalogStore) -> None:
        """The SQLite catalog store is an AvailabilityProvider."""
        assert isinstance(store, AvailabilityProvider)


class TestBatchRequest:
    """Tests for the shape of the reservability request."""

    def test_single_request_for_batch(self) -> None:
        """All ids go out in one comma-separated request."""
        transport = FakeTransport([httpx.Response(200, json={"1": True, "2": False, "3": True})])
        result = _provider(transport).is_reservable(["1", "2", "3"])

        assert result == {"1": True, "2": False, "3": True}
        assert transport.call_count == 1
        assert transport.requests[0].url.params["ids"] == "1,2,3"

    def test_user_agent_header(self) -> None:
        """Requests identify the client."""
        transport = FakeTransport([httpx.Response(200, json={"1": True})])
        _provider(transport).is_reservable(["1"])
        assert transport.requests[0].headers["user-agent"].startswith("shelfmark/")

    def test_duplicate_ids_sent_once(self) -> None:
        """Repeated ids are collapsed before the request."""
        transport = FakeTransport([httpx.Response(200, json={"1": True})])
        _provider(transport).is_reservable(["1", "1"])
        assert transport.requests[0].url.params["ids"] == "1"

    def test_empty_batch_makes_no_request(self) -> None:
        """An empty batch answers {} without touching the network."""
        transport = FakeTransport()
        assert _provider(transport).is_reservable([]) == {}
        assert transport.call_count == 0


class TestResponseValidation:
    """Tests for how the service's answer is interpreted."""

    def test_missing_ids_are_false(self) -> None:
        """Ids the service leaves out are not reservable."""
        transport = FakeTransport([httpx.Response(200, json={"1": True})])
        assert _provider(transport).is_reservable(["1", "2"]) == {"1": True, "2": False}

    def test_non_object_response_raises(self) -> None:
        """A JSON array is not a reservability map."""
        transport = FakeTransport([httpx.Response(200, json=[True, False])])
        with pytest.raises(AvailabilityFetchError, match="JSON object"):
            _provider(transport).is_reservable(["1", "2"])

    def test_invalid_json_raises(self) -> None:
        """An HTML error page with status 200 is rejected."""
        transport = FakeTransport([httpx.Response(200, text="<html>")])
        with pytest.raises(AvailabilityFetchError, match="invalid JSON"):
            _provider(transport).is_reservable(["1"])

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_non_boolean_value_raises(self, value: object) -> None:
        """Only JSON true and false are accepted as reservability values."""
        transport = FakeTransport([httpx.Response(200, json={"1": True, "2": value})])
        with pytest.raises(AvailabilityFetchError, match="expected true or false"):
            _provider(transport).is_reservable(["1", "2"])


class TestRetries:
    """Tests for retrying transient failures of the batch request."""

    def test_retry_on_503(self) -> None:
        """A gateway hiccup is retried and the second answer is used."""
        transport = FakeTransport([
            httpx.Response(503, json={"error": "unavailable"}),
            httpx.Response(200, json={"1": True}),
        ])
        assert _provider(transport).is_reservable(["1"]) == {"1": True}
        assert transport.call_count == 2

    def test_retry_exhausted_raises(self) -> None:
        """The lookup gives up after the configured number of attempts."""
        transport = FakeTransport([httpx.Response(502)] * 3)
        with pytest.raises(AvailabilityFetchError, match="after 3 attempt"):
            _provider(transport, attempts=3).is_reservable(["1"])
        assert transport.call_count == 3

    def test_client_error_not_retried(self) -> None:
        """A 403 is final and reported with its status."""
        transport = FakeTransport([httpx.Response(403, json={"error": "forbidden"})])
        with pytest.raises(AvailabilityFetchError, match="403"):
            _provider(transport).is_reservable(["1"])
        assert transport.call_count == 1

    def test_connection_error_retried(self) -> None:
        """Dropped connections count as transient."""

        class FlakyTransport(httpx.BaseTransport):
            def __init__(self) -> None:
                self.calls = 0

            def handle_request(self, request: httpx.Request) -> httpx.Response:
                self.calls += 1
                if self.calls == 1:
                    raise httpx.ConnectError("connection refused", request=request)
                return httpx.Response(200, json={"1": False})

        transport = FlakyTransport()
        assert _provider(transport).is_reservable(["1"]) == {"1": False}
        assert transport.calls == 2

    def test_connection_error_exhausted_raises(self) -> None:
        """A service that never answers is reported as unavailable."""

        class FailingTransport(httpx.BaseTransport):
            def handle_request(self, request: httpx.Request) -> httpx.Response:
                raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(AvailabilityFetchError, match="connection error"):
            _provider(FailingTransport(), attempts=2).is_reservable(["1"])

    def test_attempts_must_be_positive(self) -> None:
        """Zero attempts is a configuration error."""
        with pytest.raises(ValueError, match="attempts"):
            HttpAvailabilityProvider(ENDPOINT, attempts=0)


class TestLifecycle:
    """Tests for releasing the underlying httpx client."""

    def test_context_manager_closes_client(self) -> None:
        """Leaving the with block closes the client."""
        with _provider(FakeTransport()) as provider:
            assert not provider._client.is_closed
        assert provider._client.is_closed
