import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from pydantic import TypeAdapter, ValidationError

from pricebot.models.interaction import InteractionOption, OptionType
from pricebot.models.price import PriceQuery, PriceQuote

COMMAND_NAME = "crypto"
PRICE_SUBCOMMAND = "price"

PRICE_UNAVAILABLE_MESSAGE = "⚠️ Could not fetch price. Please try again later."

# coingecko id -> display name
COIN_NAMES = {
    "bitcoin": "Bitcoin",
    "ethereum": "Ethereum",
    "cardano": "Cardano",
    "dogecoin": "Dogecoin",
    "solana": "Solana",
    "polkadot": "Polkadot",
    "litecoin": "Litecoin",
    "ripple": "XRP (Ripple)",
    "binancecoin": "BNB",
}

CURRENCY_NAMES = {
    "usd": "US Dollar",
    "eur": "Euro",
    "gbp": "British Pound",
    "jpy": "Japanese Yen",
    "inr": "Indian Rupee",
    "cad": "Canadian Dollar",
    "aud": "Australian Dollar",
}

# en-US currency symbols
CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "HKD": "HK$",
    "MXN": "MX$",
    "BRL": "R$",
    "CNY": "CN¥",
    "TWD": "NT$",
    "KRW": "₩",
    "ILS": "₪",
    "VND": "₫",
    "PHP": "₱",
}

ZERO_DECIMAL_CURRENCIES = {"JPY", "KRW", "VND", "CLP", "ISK"}

_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")

_OPTION_LIST = TypeAdapter(List[InteractionOption])

COMMANDS = [
    {
        "name": COMMAND_NAME,
        "description": "Cryptocurrency tools",
        "type": 1,  # CHAT_INPUT
        "options": [
            {
                "name": PRICE_SUBCOMMAND,
                "description": "Get the current price of a cryptocurrency",
                "type": OptionType.SUB_COMMAND.value,
                "options": [
                    {
                        "name": "coin",
                        "description": "Cryptocurrency to look up",
                        "type": OptionType.STRING.value,
                        "required": True,
                        "choices": [
                            {"name": label, "value": coin_id}
                            for coin_id, label in COIN_NAMES.items()
                        ],
                    },
                    {
                        "name": "currency",
                        "description": "Currency to quote the price in",
                        "type": OptionType.STRING.value,
                        "required": True,
                        "choices": [
                            {"name": f"{code.upper()} ({label})", "value": code}
                            for code, label in CURRENCY_NAMES.items()
                        ],
                    },
                ],
            }
        ],
    }
]


class InvalidCommandOptions(Exception):
    """Command options are missing or malformed"""
    pass


def _options_by_name(options: Any) -> Dict[str, InteractionOption]:
    """Index options by name; the first option with a given name wins"""
    try:
        parsed = _OPTION_LIST.validate_python(options or [])
    except ValidationError as e:
        raise InvalidCommandOptions(f"Malformed options: {e}")
    by_name = {}
    for option in parsed:
        by_name.setdefault(option.name, option)
    return by_name


def _string_value(options: Dict[str, InteractionOption], name: str) -> str:
    option = options.get(name)
    if option is None:
        raise InvalidCommandOptions(f"Missing option: {name}")
    if not isinstance(option.value, str) or not option.value:
        raise InvalidCommandOptions(f"Option {name} must be a non-empty string")
    return option.value


def parse_price_query(options: Any) -> PriceQuery:
    """Build a PriceQuery from the /crypto price option tree"""
    subcommand = _options_by_name(options).get(PRICE_SUBCOMMAND)
    if subcommand is None:
        raise InvalidCommandOptions(f"Missing sub-command: {PRICE_SUBCOMMAND}")

    values = _options_by_name(subcommand.options)
    return PriceQuery(
        subcommand=PRICE_SUBCOMMAND,
        coin=_string_value(values, "coin"),
        currency=_string_value(values, "currency")
    )


def format_currency(amount: float, currency: str) -> str:
    """Format an amount the way en-US currency formatting does, e.g. $65,000.00"""
    code = currency.upper()
    if not _CURRENCY_CODE.match(code):
        raise ValueError(f"Invalid currency code: {currency}")

    digits = 0 if code in ZERO_DECIMAL_CURRENCIES else 2
    quantum = Decimal(1).scaleb(-digits)
    value = Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    number = f"{abs(value):,.{digits}f}"

    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{sign}{symbol}{number}"
    return f"{sign}{code}\u00a0{number}"


def coin_label(coin: str) -> str:
    return COIN_NAMES.get(coin, coin)


def format_price_message(quote: PriceQuote) -> str:
    price = format_currency(quote.price, quote.currency)
    return f"💰 **{coin_label(quote.coin)}** price in **{quote.currency.upper()}** is {price}"
