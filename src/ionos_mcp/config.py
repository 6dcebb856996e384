import os

DEFAULT_DNS_API_URL = "https://api.hosting.ionos.com/dns"
DEFAULT_DOMAINS_API_URL = "https://api.hosting.ionos.com/domains"
DEFAULT_SSL_API_URL = "https://api.hosting.ionos.com/ssl"


class ServerConfig:
    def __init__(self) -> None:
        self.api_key = self._get_required_env("IONOS_API_KEY")
        self.dns_api_url = os.getenv("IONOS_DNS_API_URL", DEFAULT_DNS_API_URL)
        self.domains_api_url = os.getenv("IONOS_DOMAINS_API_URL", DEFAULT_DOMAINS_API_URL)
        self.ssl_api_url = os.getenv("IONOS_SSL_API_URL", DEFAULT_SSL_API_URL)
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def _get_required_env(key: str) -> str:
        """Get required environment variable or raise descriptive error."""
        value = os.getenv(key)
        if not value:
            raise ValueError(f"Required environment variable {key} is not set")
        return value
