import os

from dotenv import load_dotenv

load_dotenv()

NL = "\n"

LOG_BORDER_LENGTH = 50
LOG_BORDER = "-" * LOG_BORDER_LENGTH

PREFIX = os.getenv("BOT_PREFIX", "?")
BOT_TOKEN = os.getenv("BOT_TOKEN")

# Expiration used by the myst command when no duration is given
DEFAULT_EXPIRATION = "1d"

AUTO_PASTE = os.getenv("AUTO_PASTE", "0") == "1"
# Code blocks longer than this are moved to PasteMyst by the listener
AUTO_PASTE_MIN_LINES = 30

MESSAGE_CHAR_LIMIT = 1900
