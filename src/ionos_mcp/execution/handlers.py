from typing import Any, Callable
from urllib.parse import quote

from ..backends import IonosClients

Handler = Callable[[IonosClients, dict[str, Any]], Any]


def _segment(arguments: dict[str, Any], key: str) -> str:
    # Missing ids are sent as-is; the API answers with its own error.
    value = arguments.get(key)
    if value is None:
        return ""
    return quote(str(value), safe="")


# DNS API

def list_dns_zones(clients: IonosClients, arguments: dict[str, Any]) -> Any:
    return clients.dns.get("/v1/zones")


def get_dns_zone(clients: IonosClients, arguments: dict[str, Any]) -> Any:
    return clients.dns.get(f"/v1/zones/{_segment(arguments, 'zoneId')}")


def update_dns_zone(clients: IonosClients, arguments: dict[str, Any]) -> Any:
    return clients.dns.patch(
        f"/v1/zones/{_segment(arguments, 'zoneId')}",
        json={"records": arguments.get("records")},
    )


# Domains API

def list_domains(clients: IonosClients, arguments: dict[str, Any]) -> Any:
    return clients.domains.get("/v1/domainitems")


def get_domain_details(clients: IonosClients, arguments: dict[str, Any]) -> Any:
    return clients.domains.get(f"/v1/domainitems/{_segment(arguments, 'domainId')}")


# SSL API

def list_certificates(clients: IonosClients, arguments: dict[str, Any]) -> Any:
    return clients.ssl.get("/v1/certificates")


def get_certificate_details(clients: IonosClients, arguments: dict[str, Any]) -> Any:
    return clients.ssl.get(f"/v1/certificates/{_segment(arguments, 'certificateId')}")


def create_certificate(clients: IonosClients, arguments: dict[str, Any]) -> Any:
    return clients.ssl.post(
        "/v1/certificates",
        json={
            "domainName": arguments.get("domainName"),
            "subjectAlternativeNames": arguments.get("subjectAlternativeNames") or [],
        },
    )


def delete_certificate(clients: IonosClients, arguments: dict[str, Any]) -> Any:
    return clients.ssl.delete(f"/v1/certificates/{_segment(arguments, 'certificateId')}")


HANDLERS: dict[str, Handler] = {
    "list_dns_zones": list_dns_zones,
    "get_dns_zone": get_dns_zone,
    "update_dns_zone": update_dns_zone,
    "list_domains": list_domains,
    "get_domain_details": get_domain_details,
    "list_certificates": list_certificates,
    "get_certificate_details": get_certificate_details,
    "create_certificate": create_certificate,
    "delete_certificate": delete_certificate,
}
