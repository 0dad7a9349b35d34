import argparse
import sys
import logging
import uvicorn
from pricebot.config.settings import HOST, PORT, LOG_LEVEL
from pricebot.services.discord_api import register_commands

# Set up logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

def register():
    """Register slash commands with Discord (deploy-time hook)"""
    logger.info("Registering slash commands...")
    if not register_commands():
        logger.error("Command registration failed, see errors above")
        sys.exit(1)

def run_server():
    """Run the interactions server"""
    logger.info(f"Starting interactions server on {HOST}:{PORT}...")
    uvicorn.run("pricebot.backend:app", host=HOST, port=PORT)

def main():
    parser = argparse.ArgumentParser(description="Crypto price Discord interactions webhook")
    parser.add_argument("--register-only", action="store_true", help="register slash commands and exit")
    parser.add_argument("--skip-register", action="store_true", help="start the server without registering commands")
    args = parser.parse_args()

    if args.register_only:
        register()
        return

    if not args.skip_register:
        # a failed registration must not keep the webhook from serving
        if not register_commands():
            logger.error("Command registration failed, serving existing commands")

    try:
        run_server()
    except KeyboardInterrupt:
        logger.info("\nShutting down...")

if __name__ == "__main__":
    main()
