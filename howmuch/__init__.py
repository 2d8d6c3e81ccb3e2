# howmuch: helpers for StarkNet fees related tasks
from howmuch.fees.estimator import estimate_cost_on_network, estimate_fee_on_network
from howmuch.fees.resources import CairoResources, Weights, build_report, get_resources_used

__all__ = [
    "CairoResources",
    "Weights",
    "build_report",
    "estimate_cost_on_network",
    "estimate_fee_on_network",
    "get_resources_used",
]
