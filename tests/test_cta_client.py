from __future__ import annotations

from unittest.mock import MagicMock, PropertyMock, patch

import pytest
import requests

from cta_board.config import CTA_API_BASE
from cta_board.data.cta_client import CTAClient
from cta_board.errors import CycleError, HttpStatusError, RequestError


@pytest.fixture()
def cta_client() -> CTAClient:
    return CTAClient("test-key")


def _mock_response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.content = text.encode("utf-8")
    response.__enter__.return_value = response
    return response


def test_get_arrivals_returns_body(cta_client: CTAClient) -> None:
    response = _mock_response(200, "<ctatt></ctatt>")
    with patch("requests.get", return_value=response) as mock_get:
        body = cta_client.get_arrivals(30173)

    assert body == b"<ctatt></ctatt>"
    mock_get.assert_called_once_with(
        CTA_API_BASE,
        params={"stpid": 30173, "key": "test-key"},
        timeout=None,
        stream=True,
    )
    response.__exit__.assert_called_once()


def test_get_arrivals_returns_undecoded_bytes(cta_client: CTAClient) -> None:
    xml = '<?xml version="1.0" encoding="utf-8"?><ctatt><stpDe>Service toward O’Hare</stpDe></ctatt>'
    with patch("requests.get", return_value=_mock_response(200, xml)):
        body = cta_client.get_arrivals(30173)

    assert body == xml.encode("utf-8")


def test_get_arrivals_uses_injected_endpoint_and_timeout() -> None:
    client = CTAClient("k", base_url="http://localhost:9999/arrivals", timeout_seconds=2.5)
    response = _mock_response(200, "<ctatt/>")
    with patch("requests.get", return_value=response) as mock_get:
        client.get_arrivals(40380)

    args, kwargs = mock_get.call_args
    assert args == ("http://localhost:9999/arrivals",)
    assert kwargs["params"] == {"stpid": 40380, "key": "k"}
    assert kwargs["timeout"] == 2.5


def test_build_params_orders_stop_before_key(cta_client: CTAClient) -> None:
    assert list(cta_client.build_params(30173)) == ["stpid", "key"]


def test_non_success_raises_http_status_error(cta_client: CTAClient) -> None:
    response = _mock_response(500, "Internal Server Error")
    with patch("requests.get", return_value=response):
        with pytest.raises(HttpStatusError) as exc_info:
            cta_client.get_arrivals(30173)

    assert exc_info.value.status_code == 500
    assert "500" in str(exc_info.value)
    assert isinstance(exc_info.value, CycleError)


def test_non_success_never_reads_body(cta_client: CTAClient) -> None:
    response = _mock_response(500)
    content = PropertyMock(return_value=b"x" * 1024)
    text = PropertyMock(return_value="x" * 1024)
    type(response).content = content
    type(response).text = text
    with patch("requests.get", return_value=response):
        with pytest.raises(HttpStatusError):
            cta_client.get_arrivals(30173)

    content.assert_not_called()
    text.assert_not_called()
    response.__exit__.assert_called_once()


def test_other_2xx_is_success(cta_client: CTAClient) -> None:
    response = _mock_response(203, "<ctatt/>")
    with patch("requests.get", return_value=response):
        assert cta_client.get_arrivals(30173) == b"<ctatt/>"


def test_network_error_raises_request_error(cta_client: CTAClient) -> None:
    with patch("requests.get", side_effect=requests.exceptions.ConnectionError("boom")):
        with pytest.raises(RequestError, match="boom"):
            cta_client.get_arrivals(30173)


def test_timeout_raises_request_error(cta_client: CTAClient) -> None:
    with patch("requests.get", side_effect=requests.exceptions.Timeout("slow")):
        with pytest.raises(RequestError):
            cta_client.get_arrivals(30173)


def test_error_while_reading_body_raises_request_error(cta_client: CTAClient) -> None:
    response = _mock_response(200)
    type(response).content = PropertyMock(
        side_effect=requests.exceptions.ChunkedEncodingError("connection reset")
    )
    with patch("requests.get", return_value=response):
        with pytest.raises(RequestError, match="connection reset"):
            cta_client.get_arrivals(30173)
