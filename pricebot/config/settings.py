import os
from dotenv import load_dotenv

load_dotenv()

# Discord
DISCORD_PUBLIC_KEY = os.getenv("DISCORD_PUBLIC_KEY", "")
DISCORD_BOT_TOKEN = os.getenv("DISCORD_BOT_TOKEN")
DISCORD_CLIENT_ID = os.getenv("DISCORD_CLIENT_ID")
DISCORD_GUILD_ID = os.getenv("DISCORD_GUILD_ID")  # optional, guild-scoped commands

# API URLs
DISCORD_API_URL = os.getenv("DISCORD_API_URL", "https://discord.com/api/v10")
DISCORD_API_TIMEOUT = float(os.getenv("DISCORD_API_TIMEOUT", "10"))  # seconds, command registration
COINGECKO_API_URL = os.getenv("COINGECKO_API_URL", "https://api.coingecko.com/api/v3")

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
