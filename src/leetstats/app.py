from __future__ import annotations

import asyncio
import logging
import os
import sys
import traceback

from blessed import Terminal

from leetstats.api.client import StatsClient
from leetstats.config import load_config
from leetstats.constants import CONFIG_DIR, LOG_FILE
from leetstats.lookup import LookupController
from leetstats.models.settings import Settings
from leetstats.tui.core import Screen, clear_screen, flush
from leetstats.tui.renderer import Renderer

logger = logging.getLogger("leetstats")


def setup_logging() -> None:
    """Send debug logs to a file; stdout belongs to the terminal UI."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    logger.setLevel(logging.DEBUG)
    handler = logging.FileHandler(str(LOG_FILE), mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)


class StatsApp:
    """Application controller - owns the lookup pipeline, the dashboard screen and the event loop."""

    def __init__(self, settings: Settings | None = None) -> None:
        # Enable VT100 escape processing on Windows
        if sys.platform == "win32":
            os.system("")
        # Box-drawing and block characters need a UTF-8 stdout
        if hasattr(sys.stdout, "reconfigure"):
            try:
                sys.stdout.reconfigure(encoding="utf-8", errors="replace")
            except (OSError, ValueError):
                pass
        self.term = Terminal()
        self.settings: Settings = settings or load_config()
        self.client: StatsClient = StatsClient(
            self.settings.api_url,
            shape=self.settings.shape,
            timeout=self.settings.timeout,
        )
        self.renderer: Renderer = Renderer()
        self.lookup: LookupController = LookupController(self.client, self.renderer)
        self.screen: Screen | None = None
        self._running: bool = False
        logger.info("App initialized, api=%s shape=%s, terminal %dx%d",
                    self.settings.api_url, self.settings.api_shape,
                    self.term.width, self.term.height)

    async def show_screen(self, screen: Screen) -> None:
        logger.info("show_screen: %s", type(screen).__name__)
        self.screen = screen
        clear_screen(self.term)
        flush()
        await screen.on_enter()

    def exit(self) -> None:
        logger.info("exit() called")
        self._running = False

    async def _startup(self) -> None:
        from leetstats.tui.dashboard import DashboardScreen
        await self.show_screen(DashboardScreen(self))

    async def run(self) -> None:
        """Main event loop."""
        self._running = True
        t = self.term

        with t.fullscreen(), t.cbreak(), t.hidden_cursor():
            clear_screen(t)
            flush()

            try:
                await self._startup()
            except Exception:
                logger.error("Startup failed:\n%s", traceback.format_exc())
                return

            while self._running:
                screen = self.screen
                if screen is None:
                    break

                screen.check_resize()

                if screen.dirty:
                    screen.dirty = False
                    try:
                        screen.render()
                        flush()
                    except Exception:
                        logger.error("Render error in %s:\n%s",
                                     type(screen).__name__,
                                     traceback.format_exc())

                # Give the lookup task a chance to run
                await asyncio.sleep(0)

                # inkey blocks, so read it off the event loop thread
                try:
                    key = await asyncio.to_thread(t.inkey, timeout=0.05)
                except Exception:
                    logger.error("inkey error:\n%s", traceback.format_exc())
                    await asyncio.sleep(0.05)
                    continue

                if key:
                    logger.debug("key: %r name=%s is_seq=%s",
                                 str(key), key.name, key.is_sequence)
                    try:
                        await screen.handle_key(key)
                    except Exception:
                        logger.error("Key handler error in %s:\n%s",
                                     type(screen).__name__,
                                     traceback.format_exc())

        logger.info("Event loop ended, cleaning up")
        await self.client.close()
