# howmuch/utils/currencies.py
from decimal import Decimal, InvalidOperation

import requests

from howmuch import config
from howmuch.utils.logger import get_logger

logger = get_logger(__name__)

PRICE_UNAVAILABLE = "could not display USD estimate: failed to get eth price"
CONVERSION_FAILED = "could not display USD estimate: failed to convert fees"


def get_eth_price():
    """Returns the ETH price in USD from the price oracle, or None if it cannot be fetched."""
    try:
        resp = requests.get(config.ETH_PRICE_URL, timeout=config.HTTP_TIMEOUT)
        resp.raise_for_status()
        return float(resp.json()["ethereum"]["usd"])
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        logger.warning(f"Failed to fetch ETH price: {e}")
        return None


def format_dollar_cost(fee: int) -> str:
    """
    Returns the USD cost of a fee given in wei, formatted with a precision of 4
    (e.g. "$1.2345 USD"). Never raises: failures yield a placeholder message.
    """
    eth_price = get_eth_price()
    if eth_price is None:
        return PRICE_UNAVAILABLE

    try:
        fee_in_eth = Decimal(int(fee)).scaleb(-config.ETHER_DECIMALS)
        dollar_fee = fee_in_eth * Decimal(str(eth_price))
    except (InvalidOperation, ValueError, TypeError) as e:
        logger.warning(f"Failed to convert fee {fee!r} to USD: {e}")
        return CONVERSION_FAILED

    return f"${dollar_fee:.4f} USD"
