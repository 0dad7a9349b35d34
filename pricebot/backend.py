from fastapi import FastAPI, Request, HTTPException
from pydantic import ValidationError
from typing import Optional
import logging
from .config.settings import DISCORD_PUBLIC_KEY, LOG_LEVEL
from .security import verify_request
from .commands import (
    COMMAND_NAME,
    PRICE_UNAVAILABLE_MESSAGE,
    InvalidCommandOptions,
    format_price_message,
    parse_price_query
)
from .services.coingecko import CoinGeckoService
from .models.interaction import Interaction, InteractionData, InteractionType, channel_message, pong
from .models.price import PriceLookupResult

# Set up logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI()

async def execute_price_command(data: Optional[InteractionData]) -> PriceLookupResult:
    """Run /crypto price; every failure comes back as a failed result"""
    try:
        query = parse_price_query(data.options if data else None)
        return await CoinGeckoService.get_price(query.coin, query.currency)
    except InvalidCommandOptions as e:
        return PriceLookupResult.failed(f"invalid options: {e}")
    except Exception as e:
        logger.error(f"Unexpected error fetching price: {e}", exc_info=True)
        return PriceLookupResult.failed("unexpected error")

def price_response(result: PriceLookupResult) -> dict:
    reason = result.reason
    if result.success:
        try:
            return channel_message(format_price_message(result.quote))
        except (ValueError, ArithmeticError) as e:
            reason = f"could not format price: {e}"

    logger.error(f"Command handling error: {reason}")
    return channel_message(PRICE_UNAVAILABLE_MESSAGE, ephemeral=True)

@app.post("/")
@app.post("/interactions")
async def interactions(request: Request):
    body = await request.body()
    if not verify_request(request.headers, body, DISCORD_PUBLIC_KEY):
        raise HTTPException(
            status_code=401,
            detail="Invalid request signature"
        )

    try:
        interaction = Interaction.model_validate_json(body)
    except ValidationError as e:
        logger.error(f"Invalid interaction payload: {e}")
        raise HTTPException(
            status_code=400,
            detail="Invalid interaction payload"
        )

    if interaction.type == InteractionType.PING:
        logger.debug("Received PING")
        return pong()

    if (
        interaction.type == InteractionType.APPLICATION_COMMAND
        and interaction.data is not None
        and interaction.data.name == COMMAND_NAME
    ):
        logger.info(f"Received /{COMMAND_NAME} command")
        result = await execute_price_command(interaction.data)
        return price_response(result)

    logger.warning(f"Unknown interaction type: {interaction.type}")
    raise HTTPException(
        status_code=400,
        detail="Unknown interaction type"
    )

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
