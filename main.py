from __future__ import annotations

import datetime
import logging
import time

import discord
from discord.ext import commands

import pastemyst
from helpers.constants import BOT_TOKEN, LOG_BORDER, NL, PREFIX

logging.basicConfig(level=logging.INFO)
log = logging.getLogger(__name__)


class Bot(commands.Bot):
    COGS = {
        "myst": "myst",
    }

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.uptime = datetime.datetime.now(datetime.timezone.utc)
        self.activity = discord.Game(f"{PREFIX}help")
        self.status = discord.Status.online

    async def setup_hook(self):
        self.pastemyst_client = pastemyst.Client()

        ext_start = time.time()
        log.info("Started loading extensions" + NL + LOG_BORDER)
        for filename in set(self.COGS.values()):
            start = time.time()
            await self.load_extension(f"cogs.{filename}")
            log.info(
                f"Loaded \033[34;1mcogs.{filename}\033[0m in \033[33;1m{round(time.time()-start, 2)}s\033[0m"
            )
        log.info(
            f"Loaded all extensions in \033[33;1m{round(time.time()-ext_start, 2)}s\033[0m"
            + NL
            + LOG_BORDER
        )

    async def on_ready(self):
        total_s = int((datetime.datetime.now(datetime.timezone.utc) - self.uptime).total_seconds())
        m, s = divmod(total_s, 60)
        log.info(f"\033[32;1m{self.user}\033[0;32m connected in \033[33;1m{m}m{s}s\033[0;32m.\033[0m")

    async def close(self):
        if hasattr(self, "pastemyst_client"):
            await self.pastemyst_client.close()
        await super().close()


if __name__ == "__main__":
    intents = discord.Intents.default()
    intents.message_content = True

    bot = Bot(
        command_prefix=commands.when_mentioned_or(PREFIX),
        case_insensitive=True,
        intents=intents,
    )
    bot.run(BOT_TOKEN, log_handler=None)
