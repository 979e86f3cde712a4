"""Tests for the mock transport and retry wrapper."""

import pytest

from buckaroo_gateway.exceptions import PermanentError, RateLimitError, TransportError
from buckaroo_gateway.models.parameters import ParameterRecord
from buckaroo_gateway.transport.base import Transport
from buckaroo_gateway.transport.mock import MockTransport
from buckaroo_gateway.transport.retry import RetryingTransport


class FlakyTransport(Transport):
    """Fails with the queued errors, then succeeds."""

    def __init__(self, errors):
        self._errors = list(errors)
        self.calls = 0

    @property
    def name(self) -> str:
        return "flaky"

    async def submit(self, endpoint, parameters, authentication):
        self.calls += 1
        if self._errors:
            raise self._errors.pop(0)
        return {"Key": "ok"}


@pytest.fixture
def no_sleep(monkeypatch):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr("buckaroo_gateway.transport.retry.asyncio.sleep", fake_sleep)
    return delays


class TestMockTransport:
    @pytest.mark.asyncio
    async def test_default_success_response(self, authentication):
        response = await MockTransport(failure_rate=0.0).submit("endpoint", [], authentication)
        assert response["Status"]["Code"]["Code"] == 190
        assert response["Key"]

    @pytest.mark.asyncio
    async def test_canned_response_is_copied(self, authentication):
        canned = {"Key": "abc", "Status": {"Code": {"Code": 490}}}
        transport = MockTransport(response=canned)
        response = await transport.submit("endpoint", [], authentication)
        response["Status"]["Code"]["Code"] = 0
        assert canned["Status"]["Code"]["Code"] == 490

    @pytest.mark.asyncio
    async def test_records_submissions(self, authentication):
        transport = MockTransport()
        records = [ParameterRecord.build("issuer", "ABNANL2A")]
        await transport.submit("endpoint", records, authentication)
        assert transport.submissions == [("endpoint", records)]
        assert transport.last_parameters == records

    @pytest.mark.asyncio
    async def test_always_failing(self, authentication):
        with pytest.raises(TransportError):
            await MockTransport(failure_rate=1.0).submit("endpoint", [], authentication)


class TestRetryingTransport:
    @pytest.mark.asyncio
    async def test_retries_transient_errors(self, authentication, no_sleep):
        inner = FlakyTransport([TransportError("down", status_code=503), TransportError("down", status_code=503)])
        transport = RetryingTransport(inner, max_retries=3, base_delay=1.0)

        assert await transport.submit("endpoint", [], authentication) == {"Key": "ok"}
        assert inner.calls == 3
        assert no_sleep == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_rate_limit_uses_retry_after(self, authentication, no_sleep):
        inner = FlakyTransport([RateLimitError(retry_after=5.0)])
        await RetryingTransport(inner, max_retries=1, base_delay=1.0).submit("endpoint", [], authentication)
        assert no_sleep == [5.0]

    @pytest.mark.asyncio
    async def test_permanent_error_not_retried(self, authentication, no_sleep):
        inner = FlakyTransport([PermanentError("bad request")])
        with pytest.raises(PermanentError):
            await RetryingTransport(inner, max_retries=3).submit("endpoint", [], authentication)
        assert inner.calls == 1
        assert no_sleep == []

    @pytest.mark.asyncio
    async def test_exhausted_retries_raise_last_error(self, authentication, no_sleep):
        errors = [TransportError(f"down {i}", status_code=503) for i in range(3)]
        inner = FlakyTransport(errors)
        with pytest.raises(TransportError, match="down 2"):
            await RetryingTransport(inner, max_retries=2, base_delay=0.5).submit("endpoint", [], authentication)
        assert inner.calls == 3

    def test_name(self):
        assert RetryingTransport(MockTransport()).name == "retrying_mock"
