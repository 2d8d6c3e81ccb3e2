# howmuch/fees/resources.py
import math
from dataclasses import dataclass, replace
from typing import Optional

from howmuch import config
from howmuch.errors import InputConfigurationError
from howmuch.gateway.client import query_tx_receipt
from howmuch.gateway.model import TransactionReceipt
from howmuch.utils.logger import get_logger

logger = get_logger(__name__)

# Column order of every report; also the order in which ties are broken
RESOURCE_FIELDS = ("steps", "pedersen", "range_check", "ecdsa", "bitwise", "ec_op")


@dataclass
class CairoResources:
    """The resources a transaction can use, one value per Cairo resource."""

    category: str
    steps: float = 0.0
    pedersen: float = 0.0
    range_check: float = 0.0
    ecdsa: float = 0.0
    bitwise: float = 0.0
    ec_op: float = 0.0

    def values(self):
        return [getattr(self, name) for name in RESOURCE_FIELDS]

    def extract_fee(self, weights: "CairoResources") -> "CairoResources":
        """Multiplies every resource by its weight."""
        return CairoResources(
            category="fee",
            steps=self.steps * weights.steps,
            pedersen=self.pedersen * weights.pedersen,
            range_check=self.range_check * weights.range_check,
            ecdsa=self.ecdsa * weights.ecdsa,
            bitwise=self.bitwise * weights.bitwise,
            ec_op=self.ec_op * weights.ec_op,
        )

    def get_limiting_resource(self) -> Optional[str]:
        """Name of the largest resource. NaN values never win; None if every value is NaN."""
        limiting = None
        for name in RESOURCE_FIELDS:
            value = getattr(self, name)
            if math.isnan(value):
                continue
            if limiting is None or value > getattr(self, limiting):
                limiting = name
        return limiting

    def get_limiting_factor(self) -> float:
        limiting = self.get_limiting_resource()
        return 0.0 if limiting is None else getattr(self, limiting)

    def update(self, steps=None, pedersen=None, range_check=None, ecdsa=None, bitwise=None, ec_op=None):
        """
        Overrides resources with textual values (e.g. from the command line).
        None leaves a resource untouched. Every value is validated before any
        resource changes.

        Raises:
            InputConfigurationError: If a value is not a finite, non-negative number.
        """
        overrides = {
            "steps": steps,
            "pedersen": pedersen,
            "range_check": range_check,
            "ecdsa": ecdsa,
            "bitwise": bitwise,
            "ec_op": ec_op,
        }
        parsed = {}
        for name, raw in overrides.items():
            if raw is None:
                continue
            try:
                value = float(raw)
            except (TypeError, ValueError):
                raise InputConfigurationError(f"Invalid {name} number: {raw!r}") from None
            if not math.isfinite(value) or value < 0:
                raise InputConfigurationError(f"Invalid {name} number: {raw!r}")
            parsed[name] = value

        for name, value in parsed.items():
            logger.debug(f"overriding {name}: {getattr(self, name)} -> {value}")
            setattr(self, name, value)
        return self


Weights = CairoResources


def default_weights(**overrides) -> Weights:
    """
    Weights from config.DEFAULT_WEIGHTS; keyword arguments that are not None replace them.

    Raises:
        InputConfigurationError: If a weight is unknown, or not a finite, positive number.
    """
    values = dict(config.DEFAULT_WEIGHTS)
    values.update({name: value for name, value in overrides.items() if value is not None})
    unknown = set(values) - set(RESOURCE_FIELDS)
    if unknown:
        raise InputConfigurationError(f"Unknown resource weight(s): {', '.join(sorted(unknown))}")
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)) \
                or not math.isfinite(value) or value <= 0:
            raise InputConfigurationError(f"Invalid {name} weight: {value!r}")
    return Weights(category="weight", **values)


@dataclass
class WeightedReport:
    usage: CairoResources
    weights: Weights
    fee: CairoResources

    @property
    def limiting_factor(self) -> float:
        return self.fee.get_limiting_factor()

    @property
    def limiting_resource(self) -> Optional[str]:
        return self.fee.get_limiting_resource()

    def rows(self):
        return [self.usage, self.weights, self.fee]

    def to_table(self) -> str:
        return render_table(self)

    def __str__(self):
        return self.to_table()


def build_report(usage: CairoResources, weights: Weights) -> WeightedReport:
    """Builds the usage / weight / fee report of a transaction."""
    # Copies, so later updates of the inputs do not leak into the report
    return WeightedReport(
        usage=replace(usage),
        weights=replace(weights),
        fee=usage.extract_fee(weights),
    )


def format_number(value: float) -> str:
    if math.isfinite(value) and value == int(value):
        return str(int(value))
    return repr(value)


def render_table(report: WeightedReport) -> str:
    """Renders the report as a box-drawn table with a limiting factor footer."""
    header = ["category"] + list(RESOURCE_FIELDS)
    body = [[row.category] + [format_number(v) for v in row.values()] for row in report.rows()]

    widths = [max(len(cells[i]) for cells in [header] + body) + 2 for i in range(len(header))]
    inner_width = sum(widths) + len(widths) - 1

    footer = f"Limiting factor: {format_number(report.limiting_factor)}"
    if report.limiting_resource is not None:
        footer += f" ({report.limiting_resource})"
    if len(footer) + 2 > inner_width:
        # Widen the last column so the footer fits
        widths[-1] += len(footer) + 2 - inner_width
        inner_width = len(footer) + 2

    def line(left, middle, right):
        return left + middle.join("─" * w for w in widths) + right

    def row(cells):
        return "│" + "│".join(cell.center(w) for cell, w in zip(cells, widths)) + "│"

    lines = [line("┌", "┬", "┐"), row(header)]
    for cells in body:
        lines.append(line("├", "┼", "┤"))
        lines.append(row(cells))
    lines.append(line("├", "┴", "┤"))
    lines.append("│" + footer.center(inner_width) + "│")
    lines.append("└" + "─" * inner_width + "┘")
    return "\n".join(lines)


def get_resources_used(tx_hash: str = None, gateway_url: str = None,
                       transaction_file: str = None) -> CairoResources:
    """
    Returns the resources used by a transaction, read from a receipt file when
    one is given, otherwise fetched from the gateway.

    Raises:
        InputConfigurationError: If neither a file nor both a hash and a gateway URL are given.
    """
    if transaction_file is not None:
        logger.debug(f"reading transaction receipt from {transaction_file}")
        tx_receipt = TransactionReceipt.from_file(transaction_file)
    elif tx_hash and gateway_url:
        logger.debug(f"querying transaction receipt {tx_hash} from {gateway_url}")
        tx_receipt = query_tx_receipt(tx_hash, gateway_url)
    else:
        raise InputConfigurationError(
            "Provide either a transaction file or a transaction hash and a gateway url"
        )

    return tx_receipt.resources_used()
