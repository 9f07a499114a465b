"""Lookup orchestration: validate input, fetch, normalize, render.

A lookup is a single run-to-completion task. The network call is its only
suspension point, and ``RequestGuard`` drops any trigger that arrives while
one is in flight. Every failure ends in a status message plus the reset
model, never in an exception escaping the task.
"""

import logging
import re
from enum import Enum

from leetstats.api.client import (
    HttpError,
    NetworkError,
    NotFoundError,
    StatsClient,
    StatsError,
)
from leetstats.constants import (
    MSG_EMPTY_USERNAME,
    MSG_GENERIC_ERROR,
    MSG_INVALID_USERNAME,
    MSG_NETWORK_ERROR,
    MSG_NOT_FOUND,
    MSG_SERVER_ERROR,
    USERNAME_MAX_LENGTH,
    USERNAME_PATTERN,
)
from leetstats.models.stats import normalize
from leetstats.tui.renderer import Renderer

logger = logging.getLogger(__name__)

_USERNAME_RE = re.compile(USERNAME_PATTERN)


class LookupOutcome(Enum):
    IGNORED = "ignored"
    INVALID = "invalid"
    FOUND = "found"
    FAILED = "failed"


class RequestGuard:
    """Allows one lookup at a time; triggers while busy are dropped."""

    def __init__(self) -> None:
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def run(self, fn, *args) -> bool:
        """Await fn(*args) unless a call is already running.

        Returns False without calling fn when busy.
        """
        if self._in_flight:
            return False
        self._in_flight = True
        try:
            await fn(*args)
        finally:
            self._in_flight = False
        return True


def validate_username(raw_input: str) -> tuple[str, str | None]:
    """Return (trimmed username, error message or None)."""
    username = raw_input.strip()
    if not username:
        return username, MSG_EMPTY_USERNAME
    if len(username) > USERNAME_MAX_LENGTH or not _USERNAME_RE.match(username):
        return username, MSG_INVALID_USERNAME
    return username, None


def error_message(error: Exception) -> str:
    if isinstance(error, NotFoundError):
        return MSG_NOT_FOUND
    if isinstance(error, NetworkError):
        return MSG_NETWORK_ERROR
    if isinstance(error, HttpError):
        return MSG_SERVER_ERROR
    return MSG_GENERIC_ERROR


class LookupController:
    def __init__(self, client: StatsClient, renderer: Renderer) -> None:
        self._client = client
        self._renderer = renderer
        self._guard = RequestGuard()
        self._outcome = LookupOutcome.IGNORED

    @property
    def in_flight(self) -> bool:
        return self._guard.in_flight

    def clear_status(self) -> None:
        self._renderer.clear_status()

    async def lookup(self, raw_input: str) -> LookupOutcome:
        if self._guard.in_flight:
            logger.debug("Lookup already in flight, ignoring %r", raw_input)
            return LookupOutcome.IGNORED

        username, problem = validate_username(raw_input)
        if problem:
            self._renderer.show_status(problem)
            self._renderer.reset()
            return LookupOutcome.INVALID

        ran = await self._guard.run(self._fetch_and_render, username)
        if not ran:
            return LookupOutcome.IGNORED
        return self._outcome

    async def _fetch_and_render(self, username: str) -> None:
        self._renderer.clear_status()
        try:
            raw = await self._client.fetch(username)
            model = normalize(raw, self._client.shape)
        except StatsError as e:
            logger.warning("Lookup for %s failed: %s", username, e)
            self._fail(e)
            return
        except Exception as e:
            logger.exception("Unexpected error looking up %s", username)
            self._fail(e)
            return

        logger.info("Loaded stats for %s: %d/%d solved",
                    username, model.total_solved, model.total_questions)
        self._renderer.apply(model)
        self._outcome = LookupOutcome.FOUND

    def _fail(self, error: Exception) -> None:
        self._renderer.show_status(error_message(error))
        self._renderer.reset()
        self._outcome = LookupOutcome.FAILED
