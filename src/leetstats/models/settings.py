from dataclasses import dataclass

from leetstats.api.shapes import ResponseShape
from leetstats.constants import DEFAULT_API_SHAPE, DEFAULT_API_URL, REQUEST_TIMEOUT


@dataclass
class Settings:
    api_url: str = DEFAULT_API_URL
    api_shape: str = DEFAULT_API_SHAPE
    timeout: float = REQUEST_TIMEOUT

    @property
    def shape(self) -> ResponseShape:
        return ResponseShape(self.api_shape)

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        api_url = data.get("api_url") or DEFAULT_API_URL
        api_shape = data.get("api_shape", DEFAULT_API_SHAPE)
        timeout = data.get("timeout", REQUEST_TIMEOUT)
        if not isinstance(api_url, str):
            raise ValueError(f"api_url must be a string, got {api_url!r}")
        # Raises ValueError for unknown shapes
        ResponseShape(api_shape)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ValueError(f"timeout must be a positive number, got {timeout!r}")
        return cls(
            api_url=api_url.rstrip("/"),
            api_shape=api_shape,
            timeout=float(timeout),
        )
