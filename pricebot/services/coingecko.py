import logging
import math
import httpx
from pricebot.config.settings import COINGECKO_API_URL
from pricebot.models.price import PriceLookupResult, PriceQuote

logger = logging.getLogger(__name__)

class CoinGeckoService:
    @staticmethod
    async def get_price(coin: str, currency: str) -> PriceLookupResult:
        """Get the current price of a coin in the given currency"""
        params = {"ids": coin, "vs_currencies": currency}
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(f"{COINGECKO_API_URL}/simple/price", params=params)
        except httpx.HTTPError as e:
            logger.error(f"CoinGecko request failed: {e}")
            return PriceLookupResult.failed(f"request failed: {e}")

        logger.debug(f"CoinGecko response status: {response.status_code}")
        if not response.is_success:
            logger.error(f"CoinGecko API error ({response.status_code}): {response.text}")
            return PriceLookupResult.failed(f"CoinGecko API error ({response.status_code})")

        try:
            data = response.json()
        except ValueError:
            logger.error(f"Failed to parse CoinGecko response as JSON: {response.text}")
            return PriceLookupResult.failed("invalid JSON from CoinGecko")

        price = None
        if isinstance(data, dict) and isinstance(data.get(coin), dict):
            price = data[coin].get(currency)
        if isinstance(price, bool) or not isinstance(price, (int, float)) or not math.isfinite(price):
            return PriceLookupResult.failed(f"price not found for {coin}/{currency}")

        logger.info(f"Price of {coin} in {currency}: {price}")
        return PriceLookupResult.ok(PriceQuote(coin=coin, currency=currency, price=float(price)))
