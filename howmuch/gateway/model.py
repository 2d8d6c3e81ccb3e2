# howmuch/gateway/model.py
import json

from howmuch.errors import InputConfigurationError, MissingOrMalformedFieldError

RECEIPT_CATEGORY = "calls"

# Resource field -> builtin counter key inside execution_resources.builtin_instance_counter
BUILTIN_COUNTERS = {
    "pedersen": "pedersen_builtin",
    "range_check": "range_check_builtin",
    "ecdsa": "ecdsa_builtin",
    "bitwise": "bitwise_builtin",
    "ec_op": "ec_op_builtin",
}


def _load(document_text: str):
    try:
        return json.loads(document_text)
    except (TypeError, ValueError) as e:
        raise MissingOrMalformedFieldError(f"Gateway document is not valid JSON: {e}") from e


def parse_dotted_field(document_text: str, path: str):
    """
    Returns the value found at a dotted path (e.g. ".actual_fee" or
    "execution_resources.n_steps") inside a JSON document.

    Raises:
        MissingOrMalformedFieldError: If the document is not JSON or the path does not exist.
    """
    value = _load(document_text)
    for key in path.lstrip(".").split("."):
        if not isinstance(value, dict) or key not in value:
            raise MissingOrMalformedFieldError(f"Field '{path}' not found in gateway document")
        value = value[key]
    return value


def parse_uint(value, field_name: str = "value") -> int:
    """
    Converts a JSON integer, decimal string or 0x-prefixed hex string to a
    non-negative int. Arbitrary precision, never goes through float.
    """
    if isinstance(value, bool):
        raise MissingOrMalformedFieldError(f"Field '{field_name}' is not an integer: {value!r}")

    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        try:
            if text.lower().startswith("0x"):
                number = int(text[2:], 16)
            elif text.isdigit():
                number = int(text)
            else:
                raise ValueError(text)
        except ValueError as e:
            raise MissingOrMalformedFieldError(f"Field '{field_name}' is not an integer: {value!r}") from e
    else:
        raise MissingOrMalformedFieldError(f"Field '{field_name}' is not an integer: {value!r}")

    if number < 0:
        raise MissingOrMalformedFieldError(f"Field '{field_name}' must not be negative: {value!r}")
    return number


def _count(container, key) -> float:
    # Absent or non-numeric counters count as zero
    if not isinstance(container, dict):
        return 0.0
    value = container.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    try:
        return float(value)
    except OverflowError:
        raise MissingOrMalformedFieldError(f"Resource counter '{key}' is too large") from None


class Transaction:
    """A raw transaction document, only checked for presence."""

    def __init__(self, raw: str):
        self.raw = raw

    @property
    def status(self):
        try:
            return parse_dotted_field(self.raw, "status")
        except MissingOrMalformedFieldError:
            return None

    @property
    def is_known(self) -> bool:
        return self.status not in (None, "NOT_RECEIVED")

    def __repr__(self):
        return f"Transaction(status={self.status!r})"


class TransactionReceipt:
    """A raw transaction receipt document."""

    def __init__(self, raw: str):
        self.raw = raw

    @classmethod
    def from_file(cls, filename: str) -> "TransactionReceipt":
        try:
            with open(filename, encoding="utf-8") as f:
                return cls(f.read())
        except (OSError, UnicodeDecodeError) as e:
            raise InputConfigurationError(f"Could not read transaction file '{filename}': {e}") from e

    def actual_fee(self) -> int:
        """Returns the fee charged for the transaction, in wei."""
        return parse_uint(parse_dotted_field(self.raw, ".actual_fee"), "actual_fee")

    def resources_used(self):
        """Returns the execution resources of the transaction as CairoResources."""
        # Imported here: resources imports the gateway client, which imports this module
        from howmuch.fees.resources import CairoResources

        document = _load(self.raw)
        exec_resources = document.get("execution_resources") if isinstance(document, dict) else None
        instance_counter = exec_resources.get("builtin_instance_counter") if isinstance(exec_resources, dict) else None

        counts = {field: _count(instance_counter, key) for field, key in BUILTIN_COUNTERS.items()}
        return CairoResources(
            category=RECEIPT_CATEGORY,
            steps=_count(exec_resources, "n_steps"),
            **counts,
        )

    def __repr__(self):
        return f"TransactionReceipt({len(self.raw)} bytes)"


class Block:
    """A raw block document."""

    def __init__(self, raw: str):
        self.raw = raw

    def gas_price(self) -> int:
        """Returns the block gas price, in wei."""
        return parse_uint(parse_dotted_field(self.raw, ".gas_price"), "gas_price")

    def __repr__(self):
        return f"Block({len(self.raw)} bytes)"
