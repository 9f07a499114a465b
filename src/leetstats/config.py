import json
import logging
from pathlib import Path

from leetstats.constants import CONFIG_FILE
from leetstats.models.settings import Settings

logger = logging.getLogger(__name__)


def load_config(path: Path = CONFIG_FILE) -> Settings:
    """Read settings from the optional config file, falling back to defaults.

    The file is never written by the app.
    """
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("config root must be an object")
            return Settings.from_dict(data)
        except (json.JSONDecodeError, ValueError, OSError) as e:
            logger.warning("Ignoring config %s: %s", path, e)
            return Settings()
    return Settings()
