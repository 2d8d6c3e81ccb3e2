# howmuch/tests/fixtures.py
import json
from unittest import mock

import requests

TX_HASH = "0x073251e7ff3843c4954aa2e7f38d8c29034e34a1ddbaeb1e62605ec10ca22367"
SOURCE_URL = "https://source.example/feeder_gateway"
DESTINATION_URL = "https://destination.example/feeder_gateway"

RECEIPT = {
    "status": "ACCEPTED_ON_L2",
    "transaction_hash": TX_HASH,
    "actual_fee": "100",
    "execution_resources": {
        "n_steps": 1000,
        "builtin_instance_counter": {
            "pedersen_builtin": 10,
            "range_check_builtin": 0,
        },
        "n_memory_holes": 3,
    },
}


def block(gas_price):
    return {"block_number": 21410, "gas_price": gas_price, "transactions": []}


def fake_response(payload, status_code=200):
    """A stand-in for requests.Response carrying a JSON (or raw text) body."""
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = payload if isinstance(payload, str) else json.dumps(payload)
    response.json.side_effect = lambda: json.loads(response.text)
    if response.ok:
        response.raise_for_status.return_value = None
    else:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


def gateway(routes):
    """
    Builds a requests.get side effect answering from a {(url, query value): payload} map.
    The query value is the transactionHash or blockNumber parameter.
    """
    calls = []

    def get(url, params=None, timeout=None):
        params = params or {}
        key = (url, params.get("transactionHash", params.get("blockNumber")))
        calls.append(key)
        if key not in routes:
            return fake_response({"code": "StarknetErrorCode.OUT_OF_RANGE", "message": "not found"}, 500)
        return fake_response(routes[key])

    get.calls = calls
    return get
