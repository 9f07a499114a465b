import logging

import httpx

from leetstats.api.shapes import ResponseShape
from leetstats.constants import DEFAULT_API_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class StatsError(Exception):
    pass


class NetworkError(StatsError):
    pass


class HttpError(StatsError):
    def __init__(self, status_code: int):
        super().__init__(f"HTTP error: {status_code}")
        self.status_code = status_code


class NotFoundError(StatsError):
    pass


class ParseError(StatsError):
    pass


class StatsClient:
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        shape: ResponseShape = ResponseShape.FLAT,
        timeout: float = REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_url = api_url.rstrip("/")
        self._shape = shape
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def shape(self) -> ResponseShape:
        return self._shape

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._api_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def fetch(self, username: str) -> dict:
        """Fetch the raw stats payload for a username.

        Performs exactly one GET. Returns the decoded payload unchanged when
        the service reports a known user; raises a StatsError subclass
        otherwise.
        """
        path = self._shape.path(username)
        try:
            client = await self._get_client()
            response = await client.get(path)
        except httpx.TransportError as e:
            raise NetworkError(f"Network error: {e}") from e

        logger.debug("GET %s -> %d", path, response.status_code)
        if response.status_code == 404:
            raise NotFoundError(f"User not found: {username}")
        if not response.is_success:
            raise HttpError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON in response: {e}") from e
        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

        if not self._shape.is_found(data):
            raise NotFoundError(f"User not found: {username}")
        return data

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None
