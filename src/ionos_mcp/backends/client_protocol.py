from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IonosClientProtocol(Protocol):
    """Protocol defining the interface for IONOS API surface clients.

    Handlers only depend on these methods, so tests can substitute any
    object that implements them for the real HTTP client.
    """

    def get(self, path: str) -> Any:
        """Issue a GET request.

        Args:
            path: Path relative to the surface base URL (e.g., "/v1/zones")

        Returns:
            Parsed JSON response body

        Raises:
            requests.RequestException: If the request fails or the API answers with a non-2xx status
        """
        ...

    def post(self, path: str, json: Any = None) -> Any:
        """Issue a POST request with a JSON body."""
        ...

    def patch(self, path: str, json: Any = None) -> Any:
        """Issue a PATCH request with a JSON body."""
        ...

    def delete(self, path: str) -> Any:
        """Issue a DELETE request."""
        ...

    def close(self) -> None:
        """Release the underlying HTTP session."""
        ...
