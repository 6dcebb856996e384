from typing import Any

import requests

from ..config import ServerConfig
from .client_protocol import IonosClientProtocol

API_KEY_HEADER = "X-API-Key"


class IonosClient:
    """HTTP client for a single IONOS API surface (DNS, Domains or SSL)."""

    def __init__(self, base_url: str, api_key: str) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.session.headers.update(
            {
                API_KEY_HEADER: api_key,
                "Accept": "application/json",
            }
        )

    def request(self, method: str, path: str, json: Any = None) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        response = self.session.request(method, url, json=json)
        response.raise_for_status()
        return self._parse_body(response)

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def patch(self, path: str, json: Any = None) -> Any:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)

    def close(self) -> None:
        self.session.close()

    @staticmethod
    def _parse_body(response: requests.Response) -> Any:
        # DELETE and some PATCH calls answer with an empty body
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text


class IonosClients:
    """The three API surface clients, sharing one credential."""

    def __init__(self, dns: IonosClientProtocol, domains: IonosClientProtocol, ssl: IonosClientProtocol) -> None:
        self.dns = dns
        self.domains = domains
        self.ssl = ssl

    @classmethod
    def from_config(cls, config: ServerConfig) -> "IonosClients":
        return cls(
            dns=IonosClient(config.dns_api_url, config.api_key),
            domains=IonosClient(config.domains_api_url, config.api_key),
            ssl=IonosClient(config.ssl_api_url, config.api_key),
        )

    def close(self) -> None:
        for client in (self.dns, self.domains, self.ssl):
            client.close()
