from enum import Enum
from urllib.parse import quote

from leetstats.constants import USER_PROFILE_PATH


class ResponseShape(Enum):
    """Payload layouts served by the known stats APIs.

    FLAT carries per-tier counts as top-level fields (``easySolved``,
    ``totalEasy``, ...). NESTED carries solved counts as a list of
    ``{difficulty, count, submissions}`` entries under
    ``matchedUserStats.acSubmissionNum``.
    """

    FLAT = "flat"
    NESTED = "nested"

    def path(self, username: str) -> str:
        """Endpoint path for a username, relative to the API base URL."""
        quoted = quote(username, safe="")
        if self is ResponseShape.NESTED:
            return USER_PROFILE_PATH.format(username=quoted)
        return f"/{quoted}"

    def is_found(self, payload: dict) -> bool:
        """Whether a successful response actually describes a user."""
        if self is ResponseShape.NESTED:
            if "errors" in payload:
                return False
            return "matchedUserStats" in payload or "ranking" in payload
        return payload.get("status") == "success"


def detect_shape(raw: dict) -> ResponseShape:
    if isinstance(raw.get("matchedUserStats"), dict):
        return ResponseShape.NESTED
    return ResponseShape.FLAT
