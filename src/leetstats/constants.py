import os
from pathlib import Path

# Stats service URLs
DEFAULT_API_URL = "https://leetcode-stats-api.herokuapp.com"
USER_PROFILE_PATH = "/userProfile/{username}"

# Config paths
CONFIG_DIR = Path(os.path.expanduser("~")) / ".leetstats"
CONFIG_FILE = CONFIG_DIR / "config.json"
LOG_FILE = CONFIG_DIR / "debug.log"

# API settings
REQUEST_TIMEOUT = 15.0  # seconds
DEFAULT_API_SHAPE = "flat"

# Username input
USERNAME_MAX_LENGTH = 50
USERNAME_PATTERN = r"^[A-Za-z0-9_-]+$"

# Display values
RANKING_SENTINEL = "--"
DIFFICULTIES = ("easy", "medium", "hard")

# Difficulty display
DIFFICULTY_LABELS = {
    "easy": "Easy",
    "medium": "Medium",
    "hard": "Hard",
}

DIFFICULTY_COLORS = {
    "easy": "green",
    "medium": "yellow",
    "hard": "red",
}

PRIMARY_COLOR = "bright_cyan"
GAUGE_BACKGROUND_COLOR = "bright_black"

# Widget sizes
BAR_WIDTH = 30
GAUGE_RADIUS = 5

# Status messages
MSG_EMPTY_USERNAME = "Please enter a username"
MSG_INVALID_USERNAME = (
    f"Usernames are 1-{USERNAME_MAX_LENGTH} letters, digits, '_' or '-'."
)
MSG_NOT_FOUND = "User not found. Please check the username and try again."
MSG_NETWORK_ERROR = "Network error. Please check your connection and try again."
MSG_SERVER_ERROR = "Server error. Please try again later."
MSG_GENERIC_ERROR = "An error occurred. Please try again."
