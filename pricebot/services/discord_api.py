import requests
import logging
from typing import Dict, List, Optional
from pricebot.config.settings import (
    DISCORD_API_URL,
    DISCORD_API_TIMEOUT,
    DISCORD_BOT_TOKEN,
    DISCORD_CLIENT_ID,
    DISCORD_GUILD_ID
)
from pricebot.commands import COMMANDS

logger = logging.getLogger(__name__)

def commands_url(client_id: str, guild_id: Optional[str] = None) -> str:
    """Guild-scoped commands endpoint when a guild is given, else global"""
    base = f"{DISCORD_API_URL}/applications/{client_id}"
    if guild_id:
        return f"{base}/guilds/{guild_id}/commands"
    return f"{base}/commands"

def register_commands(commands: List[Dict] = COMMANDS) -> bool:
    """Overwrite the application's commands with the given set.

    The PUT replaces the whole command list, so running this again with
    the same definitions leaves Discord in the same state.
    """
    if not DISCORD_BOT_TOKEN or not DISCORD_CLIENT_ID:
        logger.error("Missing DISCORD_BOT_TOKEN or DISCORD_CLIENT_ID, skipping command registration")
        return False

    url = commands_url(DISCORD_CLIENT_ID, DISCORD_GUILD_ID)
    headers = {
        "Authorization": f"Bot {DISCORD_BOT_TOKEN}",
        "Content-Type": "application/json"
    }
    scope = f"guild {DISCORD_GUILD_ID}" if DISCORD_GUILD_ID else "global"
    try:
        logger.info(f"Registering {len(commands)} command(s) ({scope})")
        response = requests.put(url, headers=headers, json=commands, timeout=DISCORD_API_TIMEOUT)
    except requests.RequestException as e:
        logger.error(f"Failed to register commands: {e}")
        return False

    if not response.ok:
        logger.error(f"Failed to register commands ({response.status_code}): {response.text}")
        return False

    logger.info("Commands registered successfully")
    return True
