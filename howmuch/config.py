# howmuch/config.py
import os

# Feeder gateway settings
DEFAULT_SOURCE_NETWORK_GATEWAY_URL = "https://alpha4-2.starknet.io/feeder_gateway"  # goerli 2 testnet
DEFAULT_DESTINATION_NETWORK_GATEWAY_URL = "https://alpha-mainnet.starknet.io/feeder_gateway"
LATEST_BLOCK = "latest"  # Gateway alias for the most recent block
HTTP_TIMEOUT = float(os.environ.get("HOWMUCH_HTTP_TIMEOUT", "30"))  # Seconds

# Fees are reported in wei; ether has 18 decimals
ETHER_DECIMALS = 18

# Price oracle used for the optional USD estimate
ETH_PRICE_URL = "https://api.coingecko.com/api/v3/simple/price?ids=ethereum&vs_currencies=usd"

# Relative proof costs of each Cairo resource (fee per unit)
DEFAULT_WEIGHTS = {
    "steps": 0.05,
    "pedersen": 1.6,
    "range_check": 0.8,
    "ecdsa": 102.4,
    "bitwise": 3.2,
    "ec_op": 51.2,
}

# Logging
LOG_LEVEL = os.environ.get("HOWMUCH_LOG", "WARNING").upper()
LOG_FILE = os.environ.get("HOWMUCH_LOG_FILE")  # No file logging when unset
