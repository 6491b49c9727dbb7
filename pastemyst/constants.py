import os

from dotenv import load_dotenv

load_dotenv()

API_URL = os.getenv("PASTEMYST_API_URL", "https://paste.myst.rs/api/")
PASTE_URL = os.getenv("PASTEMYST_URL", "https://paste.myst.rs/")

USER_AGENT = "pastemyst.py"

# Stored verbatim by the service when a paste is created without code
UNDEFINED_CODE = "undefined"

# Characters left alone by JavaScript's encodeURI
URI_SAFE_CHARS = ";,/?:@&=+$-_.!~*'()#"

FENCE = "```"
