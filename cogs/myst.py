from __future__ import annotations

import logging
import typing
from typing import List, Optional

import discord
from discord.ext import commands

import pastemyst
from helpers.constants import (
    AUTO_PASTE,
    AUTO_PASTE_MIN_LINES,
    DEFAULT_EXPIRATION,
    MESSAGE_CHAR_LIMIT,
    NL,
)

if typing.TYPE_CHECKING:
    from main import Bot


log = logging.getLogger(__name__)


def _more_line(count: int) -> str:
    return f"...and {count} more"


def format_links(pastes: List[pastemyst.Paste]) -> str:
    lines = []
    for idx, paste in enumerate(pastes, start=1):
        line = f"{idx}. <{paste.url}> (`{paste.language}`, expires in `{paste.expiresIn}`)"
        remaining = len(pastes) - idx
        candidate = lines + [line] + ([_more_line(remaining)] if remaining else [])
        if len(NL.join(candidate)) > MESSAGE_CHAR_LIMIT:
            break
        lines.append(line)

    if len(lines) < len(pastes):
        lines.append(_more_line(len(pastes) - len(lines)))
    return NL.join(lines)


def get_target_message(message: discord.Message) -> discord.Message:
    """The message being replied to if there is one, else the message itself."""
    reference = getattr(message, "reference", None)
    resolved = getattr(reference, "resolved", None)
    if isinstance(getattr(resolved, "content", None), str):
        return resolved
    return message


def is_long_code_block(block: pastemyst.CodeBlockMatch) -> bool:
    return block.code.count(NL) + 1 > AUTO_PASTE_MIN_LINES


class PasteMyst(commands.Cog):
    """Move code blocks from chat to PasteMyst."""

    def __init__(self, bot: Bot, *, client: Optional[pastemyst.Client] = None):
        self.bot = bot
        self._owns_client = client is None and not hasattr(bot, "pastemyst_client")
        self.client = client or getattr(bot, "pastemyst_client", None) or pastemyst.Client()
        self.auto_paste = AUTO_PASTE

    display_emoji = "📋"

    async def cog_unload(self) -> None:
        if self._owns_client:
            await self.client.close()

    async def paste_message(
        self, message: discord.Message, seconds: Optional[float] = None
    ) -> List[pastemyst.Paste]:
        if seconds is None:
            pastes = await self.client.create_paste_from_message(
                message, DEFAULT_EXPIRATION
            )
        else:
            pastes = await self.client.create_paste_from_message(
                message, seconds=seconds
            )
        for paste in pastes:
            log.info(
                "Created paste %s (%s) from message %s",
                paste.id,
                paste.language,
                getattr(message, "id", None),
            )
        return pastes

    @commands.command(
        name="myst",
        aliases=("paste",),
        brief="Upload code blocks to PasteMyst",
        help=(
            "Uploads every code block of your message, or of the message you are replying to,"
            " to PasteMyst. The optional duration in seconds is rounded up to the next"
            f" expiration PasteMyst supports, `{DEFAULT_EXPIRATION}` by default."
        ),
    )
    async def myst(self, ctx: commands.Context, seconds: Optional[float] = None):
        message = get_target_message(ctx.message)
        if not pastemyst.contains_code_block(message):
            return await ctx.reply("No code blocks found in that message.")

        try:
            pastes = await self.paste_message(message, seconds)
        except ValueError as e:
            return await ctx.reply(str(e))
        except pastemyst.PasteMystHTTPException as e:
            log.warning("PasteMyst rejected a paste: %s", e)
            return await ctx.reply(f"PasteMyst returned an error: {e}")

        await ctx.reply(format_links(pastes))

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        if not self.auto_paste or message.author.bot:
            return

        blocks = pastemyst.get_full_code_block_info(message)
        if not any(is_long_code_block(block) for block in blocks):
            return

        # The myst command uploads these itself
        ctx = await self.bot.get_context(message)
        if ctx.valid:
            return

        try:
            pastes = await self.paste_message(message)
        except pastemyst.PasteMystHTTPException:
            log.exception("Auto-paste of message %s failed", message.id)
            return

        await message.reply(
            "That's a lot of code, here it is on PasteMyst:" + NL + format_links(pastes),
            mention_author=False,
        )


async def setup(bot: commands.Bot) -> None:
    await bot.add_cog(PasteMyst(bot))
