from unittest.mock import Mock, patch

import pytest
import requests

from ionos_mcp.backends import IonosClient, IonosClientProtocol, IonosClients
from ionos_mcp.config import ServerConfig


def _response(status_code: int, body: bytes = b"") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.url = "https://api.hosting.ionos.com/dns/v1/zones"
    return response


def test_session_carries_credential_and_accept_headers() -> None:
    client = IonosClient("https://api.hosting.ionos.com/dns", "prefix.secret")

    assert client.session.headers["X-API-Key"] == "prefix.secret"
    assert client.session.headers["Accept"] == "application/json"
    assert isinstance(client, IonosClientProtocol)


def test_request_joins_base_url_and_returns_parsed_json() -> None:
    client = IonosClient("https://api.hosting.ionos.com/dns/", "prefix.secret")

    with patch.object(client.session, "request", return_value=_response(200, b'[{"id": "z1"}]')) as mock_request:
        body = client.get("/v1/zones")

    assert body == [{"id": "z1"}]
    mock_request.assert_called_once_with("GET", "https://api.hosting.ionos.com/dns/v1/zones", json=None)


def test_patch_sends_json_body() -> None:
    client = IonosClient("https://api.hosting.ionos.com/dns", "prefix.secret")
    records = [{"name": "www.example.com", "type": "A", "content": "192.0.2.1"}]

    with patch.object(client.session, "request", return_value=_response(200, b"{}")) as mock_request:
        client.patch("/v1/zones/z1", json={"records": records})

    mock_request.assert_called_once_with(
        "PATCH",
        "https://api.hosting.ionos.com/dns/v1/zones/z1",
        json={"records": records},
    )


def test_empty_body_is_returned_as_none() -> None:
    client = IonosClient("https://api.hosting.ionos.com/ssl", "prefix.secret")

    with patch.object(client.session, "request", return_value=_response(204)):
        assert client.delete("/v1/certificates/c1") is None


def test_non_json_body_is_returned_as_text() -> None:
    client = IonosClient("https://api.hosting.ionos.com/ssl", "prefix.secret")

    with patch.object(client.session, "request", return_value=_response(200, b"accepted")):
        assert client.get("/v1/certificates") == "accepted"


def test_non_2xx_status_raises_http_error_with_response() -> None:
    client = IonosClient("https://api.hosting.ionos.com/dns", "prefix.secret")
    error_response = _response(404, b'{"message": "Zone not found"}')

    with patch.object(client.session, "request", return_value=error_response):
        with pytest.raises(requests.HTTPError) as exc_info:
            client.get("/v1/zones/missing")

    assert exc_info.value.response is error_response


def test_clients_from_config_share_one_credential(monkeypatch) -> None:
    monkeypatch.setenv("IONOS_API_KEY", "prefix.secret")
    clients = IonosClients.from_config(ServerConfig())

    assert clients.dns.base_url == "https://api.hosting.ionos.com/dns"
    assert clients.domains.base_url == "https://api.hosting.ionos.com/domains"
    assert clients.ssl.base_url == "https://api.hosting.ionos.com/ssl"
    for client in (clients.dns, clients.domains, clients.ssl):
        assert client.session.headers["X-API-Key"] == "prefix.secret"


def test_close_closes_every_session() -> None:
    dns, domains, ssl = Mock(), Mock(), Mock()

    IonosClients(dns=dns, domains=domains, ssl=ssl).close()

    dns.close.assert_called_once_with()
    domains.close.assert_called_once_with()
    ssl.close.assert_called_once_with()


def test_protocol_requires_close() -> None:
    class ReadOnlyClient:
        def get(self, path: str) -> None: ...
        def post(self, path: str, json=None) -> None: ...
        def patch(self, path: str, json=None) -> None: ...
        def delete(self, path: str) -> None: ...

    assert not isinstance(ReadOnlyClient(), IonosClientProtocol)
