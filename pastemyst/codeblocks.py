"""Finding fenced code blocks in Discord messages.

A block runs from an opening ````` to the next `````. The characters directly
after the opening fence may be a language tag:

- a tag followed by a line break is always treated as the tag, and tags the
  mapper does not know fall back to ``"autodetect"``,
- a tag that continues on the same line without whitespace (```` ```PHP<?php````)
  is only taken as a tag when it is a known language of two or more
  characters and the next character cannot continue an identifier or
  expression, so ```` ```c=1;```` and ```` ```js[0]```` stay code,
- a tag with nothing after it (```` ```py```` ) is the code itself.

Exactly one line break after the opening fence (or tag) and one before the
closing fence are dropped from the code; everything else is kept verbatim.
"""

from __future__ import annotations

import re
import typing
from dataclasses import dataclass

from .constants import FENCE
from .languages import PasteMystLanguage, discord_to_pastemyst_language, is_known_tag

if typing.TYPE_CHECKING:
    import discord

    MessageLike = typing.Union[str, discord.Message, None]

AUTODETECT = PasteMystLanguage.AUTODETECT.value

CODE_BLOCK_REGEX = re.compile(
    r"%s(?P<body>.*?)%s" % (re.escape(FENCE), re.escape(FENCE)), re.DOTALL
)
LANGUAGE_TAG_REGEX = re.compile(r"[A-Za-z0-9_+#.\-]+")
# Characters that would continue an identifier or expression, e.g. ```c=1;```
CONTINUATION_CHARS = frozenset("=[(.,:;+-*/%&|^!?~)]")
LEADING_NEWLINE_REGEX = re.compile(r"\A\r?\n")
TRAILING_NEWLINE_REGEX = re.compile(r"\r?\n\Z")


@dataclass(frozen=True)
class CodeBlockMatch:
    code: str
    language: str = AUTODETECT


def _get_content(message: MessageLike) -> typing.Optional[str]:
    if isinstance(message, str):
        return message
    # discord.Message and anything else carrying text in .content
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else None


def _starts_after_tag(tag: str, rest: str) -> bool:
    """Whether code running on from a known tag on the same line really starts after it."""
    if len(tag) < 2 or not rest:
        return False
    char = rest[0]
    return not (char.isspace() or char.isalnum() or char == "_" or char in CONTINUATION_CHARS)


def _split_language(body: str) -> typing.Tuple[str, str]:
    """Split a block's body into (language, code)."""
    language = AUTODETECT
    tag = LANGUAGE_TAG_REGEX.match(body)
    if tag is not None:
        rest = body[tag.end():]
        mapped = discord_to_pastemyst_language(tag.group())
        known = is_known_tag(tag.group())

        if LEADING_NEWLINE_REGEX.match(rest):
            body = rest
            if known:
                language = mapped
        elif known and _starts_after_tag(tag.group(), rest):
            body = rest
            language = mapped

    body = LEADING_NEWLINE_REGEX.sub("", body, count=1)
    body = TRAILING_NEWLINE_REGEX.sub("", body, count=1)
    return language, body


def _iter_code_blocks(message: MessageLike) -> typing.Iterator[CodeBlockMatch]:
    content = _get_content(message)
    if not content:
        return
    for match in CODE_BLOCK_REGEX.finditer(content):
        language, code = _split_language(match.group("body"))
        yield CodeBlockMatch(code=code, language=language)


def contains_code_block(message: MessageLike) -> bool:
    """Whether the message has at least one complete fenced code block."""
    return next(_iter_code_blocks(message), None) is not None


def get_first_code_block_language(message: MessageLike) -> str:
    """PasteMyst language of the first code block, ``"autodetect"`` if it has none."""
    block = next(_iter_code_blocks(message), None)
    return block.language if block is not None else AUTODETECT


def get_first_code_block_content(message: MessageLike) -> str:
    """Code of the first block without fences and tag, ``""`` if there is no block."""
    block = next(_iter_code_blocks(message), None)
    return block.code if block is not None else ""


def get_full_code_block_info(message: MessageLike) -> typing.List[CodeBlockMatch]:
    """Every code block of the message in the order they appear."""
    return list(_iter_code_blocks(message))
