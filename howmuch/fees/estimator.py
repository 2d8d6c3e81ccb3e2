# howmuch/fees/estimator.py
from howmuch import config
from howmuch.errors import PreconditionError
from howmuch.gateway.client import query_block, query_tx_receipt
from howmuch.utils.logger import get_logger

logger = get_logger(__name__)


def compute_static_tx_fee(actual_fee: int, block_gas_price: int) -> int:
    """
    Computes the static part of a transaction fee: the amount of work paid for,
    independent of the gas price of the block it was included in.

    Raises:
        PreconditionError: If the gas price exceeds the actual fee, or is zero.
    """
    if block_gas_price > actual_fee:
        raise PreconditionError(
            f"Block gas price must be lower than actual fee (gas price {block_gas_price}, actual fee {actual_fee})"
        )
    if block_gas_price == 0:
        raise PreconditionError("Block gas price must not be zero")
    return actual_fee // block_gas_price


def compute_actual_tx_fee(tx_static_fee: int, block_gas_price: int) -> int:
    """Computes the fee a transaction with the given static fee pays at a gas price."""
    return tx_static_fee * block_gas_price


def format_units(amount: int, decimals: int = config.ETHER_DECIMALS) -> str:
    """
    Formats an amount of base units as a decimal string with exactly `decimals`
    fractional digits, e.g. format_units(50) == "0.000000000000000050".
    """
    if amount < 0:
        raise ValueError("Amount must not be negative.")
    whole, fraction = divmod(amount, 10 ** decimals)
    if decimals == 0:
        return str(whole)
    return f"{whole}.{fraction:0{decimals}d}"


def _block_id(block_number) -> str:
    return config.LATEST_BLOCK if block_number is None else str(block_number)


def estimate_fee_on_network(tx_hash: str, source_network_gateway_url: str,
                            destination_network_gateway_url: str,
                            source_block_number=None, destination_block_number=None) -> int:
    """
    Estimates what a transaction of the source network would cost on the
    destination network, in wei.

    The static fee is recovered by dividing the actual fee by the source block
    gas price, then multiplied by the destination block gas price. All
    arithmetic is done on integers.
    """
    source_block = _block_id(source_block_number)
    destination_block = _block_id(destination_block_number)

    logger.debug(f"querying transaction {tx_hash} on source network")
    actual_fee = query_tx_receipt(tx_hash, source_network_gateway_url).actual_fee()
    logger.debug(f"transaction actual fee: {actual_fee}")

    logger.debug(f"querying block {source_block} on source network")
    gas_price = query_block(source_block, source_network_gateway_url).gas_price()
    logger.debug(f"source block gas price: {gas_price}")

    tx_static_fee = compute_static_tx_fee(actual_fee, gas_price)
    logger.debug(f"transaction static fee: {tx_static_fee}")

    logger.debug(f"querying block {destination_block} on destination network")
    destination_gas_price = query_block(destination_block, destination_network_gateway_url).gas_price()
    logger.debug(f"destination block gas price: {destination_gas_price}")

    destination_fee = compute_actual_tx_fee(tx_static_fee, destination_gas_price)
    logger.debug(f"transaction actual fee on destination network: {destination_fee}")
    return destination_fee


def estimate_cost_on_network(tx_hash: str, source_network_gateway_url: str,
                             destination_network_gateway_url: str,
                             source_block_number=None, destination_block_number=None) -> str:
    """
    Same as estimate_fee_on_network, but returns the fee in ether as a decimal string.

    Example:
        >>> estimate_cost_on_network(
        ...     "0x073251e7ff3843c4954aa2e7f38d8c29034e34a1ddbaeb1e62605ec10ca22367",
        ...     "https://alpha4-2.starknet.io/feeder_gateway",
        ...     "https://alpha-mainnet.starknet.io/feeder_gateway",
        ...     21410, 15925)  # doctest: +SKIP
    """
    destination_fee = estimate_fee_on_network(
        tx_hash,
        source_network_gateway_url,
        destination_network_gateway_url,
        source_block_number,
        destination_block_number,
    )
    return format_units(destination_fee, config.ETHER_DECIMALS)
