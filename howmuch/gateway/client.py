# howmuch/gateway/client.py
import requests

from howmuch import config
from howmuch.errors import FetchError
from howmuch.gateway.model import Block, Transaction, TransactionReceipt
from howmuch.utils.logger import get_logger

logger = get_logger(__name__)


def http_get(url: str, params: dict = None) -> str:
    """
    Performs a blocking GET request and returns the response body as text.

    Raises:
        FetchError: If the gateway cannot be reached or answers with a non-2xx status.
    """
    logger.debug(f"GET {url} params={params}")
    try:
        response = requests.get(url, params=params, timeout=config.HTTP_TIMEOUT)
    except requests.RequestException as e:
        raise FetchError(f"Failed to reach {url}: {e}") from e

    if not response.ok:
        # The feeder gateway explains rejected queries in the body
        body = (response.text or "").strip()
        raise FetchError(f"{url} returned HTTP {response.status_code}: {body[:200]}")

    return response.text


def _endpoint(network_gateway_url: str, name: str) -> str:
    return f"{network_gateway_url.rstrip('/')}/{name}"


def query_tx(tx_hash: str, network_gateway_url: str) -> Transaction:
    """Fetches a transaction from the `get_transaction` endpoint of a feeder gateway."""
    return Transaction(http_get(
        _endpoint(network_gateway_url, "get_transaction"),
        params={"transactionHash": tx_hash},
    ))


def query_tx_receipt(tx_hash: str, network_gateway_url: str) -> TransactionReceipt:
    """Fetches a transaction receipt from the `get_transaction_receipt` endpoint."""
    return TransactionReceipt(http_get(
        _endpoint(network_gateway_url, "get_transaction_receipt"),
        params={"transactionHash": tx_hash},
    ))


def query_block(block_number, network_gateway_url: str) -> Block:
    """
    Fetches a block from the `get_block` endpoint.

    Args:
        block_number: A block number, or "latest" for the most recent block.
        network_gateway_url: Base URL of the feeder gateway.
    """
    return Block(http_get(
        _endpoint(network_gateway_url, "get_block"),
        params={"blockNumber": str(block_number)},
    ))
