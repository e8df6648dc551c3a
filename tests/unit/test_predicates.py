r"""Unit tests for the ready-made predicates."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from abackoff import retry
from abackoff.predicates import (
    RETRY_STATUS_CODES,
    all_of,
    any_of,
    retry_on_exceptions,
    retry_on_http_errors,
)

TEST_URL = "https://api.example.com/data"


def make_status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", TEST_URL)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(f"status {status_code}", request=request, response=response)


#########################################
#     Tests for retry_on_exceptions     #
#########################################


def test_retry_on_exceptions_matches_subclasses() -> None:
    """Test that subclasses of the given types match."""
    predicate = retry_on_exceptions(ConnectionError, TimeoutError)
    assert predicate(ConnectionResetError(), ())
    assert predicate(TimeoutError(), ())
    assert not predicate(ValueError(), ())


def test_retry_on_exceptions_requires_types() -> None:
    """Test that at least one exception type is required."""
    with pytest.raises(ValueError, match=r"requires at least one exception type"):
        retry_on_exceptions()


##########################################
#     Tests for retry_on_http_errors     #
##########################################


def test_retry_status_codes() -> None:
    """Test the default retryable status codes."""
    assert RETRY_STATUS_CODES == (429, 500, 502, 503, 504)


@pytest.mark.parametrize("status_code", RETRY_STATUS_CODES)
def test_retry_on_http_errors_retryable_status(status_code: int) -> None:
    """Test that retryable status codes are retried."""
    assert retry_on_http_errors()(make_status_error(status_code), ())


@pytest.mark.parametrize("status_code", [400, 401, 403, 404, 501])
def test_retry_on_http_errors_non_retryable_status(status_code: int) -> None:
    """Test that other status codes are not retried."""
    assert not retry_on_http_errors()(make_status_error(status_code), ())


def test_retry_on_http_errors_custom_forcelist() -> None:
    """Test a custom status forcelist."""
    predicate = retry_on_http_errors(status_forcelist=(404,))
    assert predicate(make_status_error(404), ())
    assert not predicate(make_status_error(503), ())


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectTimeout("timeout"),
        httpx.ReadTimeout("timeout"),
        httpx.PoolTimeout("timeout"),
        httpx.ConnectError("refused"),
        httpx.ReadError("reset"),
        httpx.RemoteProtocolError("closed"),
    ],
)
def test_retry_on_http_errors_transport_errors(error: Exception) -> None:
    """Test that timeouts and transport errors are retried."""
    assert retry_on_http_errors()(error, ())


def test_retry_on_http_errors_other_errors() -> None:
    """Test that unrelated errors are not retried."""
    predicate = retry_on_http_errors()
    assert not predicate(ValueError("bad"), ())
    assert not predicate(httpx.InvalidURL("bad url"), ())


@pytest.mark.asyncio
async def test_retry_on_http_errors_with_retry(mock_sleep: AsyncMock) -> None:
    """Test a flaky HTTP call driven by the retry loop."""
    response = httpx.Response(200, request=httpx.Request("GET", TEST_URL))
    operation = AsyncMock(side_effect=[make_status_error(503), httpx.ConnectError("refused"), response])

    result = await retry(
        {"max_retries": 3, "predicate": retry_on_http_errors(), "sleep_function": mock_sleep},
        operation,
        TEST_URL,
    )

    assert result is response
    assert operation.await_count == 3


@pytest.mark.asyncio
async def test_retry_on_http_errors_non_retryable_with_retry(mock_sleep: AsyncMock) -> None:
    """Test that a 404 is raised at once."""
    error = make_status_error(404)
    operation = AsyncMock(side_effect=error)

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        await retry(
            {"max_retries": 3, "predicate": retry_on_http_errors(), "sleep_function": mock_sleep},
            operation,
        )
    assert exc_info.value is error
    mock_sleep.assert_not_called()


######################################
#     Tests for any_of and all_of     #
######################################


def test_any_of() -> None:
    """Test that any_of approves when one predicate approves."""
    predicate = any_of(Mock(return_value=False), Mock(return_value=True))
    assert predicate(ValueError(), ())
    assert not any_of(Mock(return_value=False))(ValueError(), ())
    assert not any_of()(ValueError(), ())


def test_all_of() -> None:
    """Test that all_of approves when every predicate approves."""
    assert all_of(Mock(return_value=True), Mock(return_value=True))(ValueError(), ())
    assert not all_of(Mock(return_value=True), Mock(return_value=False))(ValueError(), ())


def test_combinators_forward_arguments() -> None:
    """Test that the error and arguments reach each predicate."""
    inner = Mock(return_value=True)
    error = ValueError()
    any_of(inner)(error, (1,))
    all_of(inner)(error, (1,))
    assert inner.call_count == 2
    inner.assert_called_with(error, (1,))
