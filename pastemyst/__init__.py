"""Async PasteMyst API wrapper and Discord code block helpers."""

__version__ = "1.0.0"

from .client import Client, create_paste_myst, get_paste_myst
from .codeblocks import (
    CodeBlockMatch,
    contains_code_block,
    get_first_code_block_content,
    get_first_code_block_language,
    get_full_code_block_info,
)
from .exceptions import (
    BadRequest,
    ClientClosed,
    NotFound,
    PasteMystException,
    PasteMystHTTPException,
)
from .expiration import (
    EXPIRATIONS,
    Expiration,
    expiration_to_seconds,
    get_next_higher_expiration,
    get_next_lower_expiration,
)
from .languages import (
    DISCORD_LANGUAGES,
    PasteMystLanguage,
    discord_to_pastemyst_language,
)
from .paste import Paste
