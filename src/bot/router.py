"""Bot router composition.

Command handlers are registered first; `handle_message` is the catch-all so that unknown commands
and non-text messages still get a reply.
"""

from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart

from src.bot.handlers import handle_message, handle_start, handle_stats

router = Router(name="root")
router.message.register(handle_start, CommandStart())
router.message.register(handle_start, Command("phrases"))
router.message.register(handle_stats, Command("stats"))
router.message.register(handle_message)
