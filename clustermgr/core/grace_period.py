"""Node drain grace period defaults, rendering and parsing."""

import math
from typing import List, Optional

from ..errors import InvalidGracePeriodError
from ..model.cluster import ClusterRecord, GracePeriodValue
from ..model.upgrade import HOUR_UNITS, MINUTE_UNITS, MINUTES_PER_HOUR, NodeDrainGracePeriod
from .interactive import Prompter

DEFAULT_GRACE_PERIOD = "1 hour"

GRACE_PERIOD_OPTIONS: List[str] = [
    "15 minutes",
    "30 minutes",
    "45 minutes",
    "1 hour",
    "2 hours",
    "4 hours",
    "8 hours",
]

GRACE_PERIOD_HELP = (
    "You may set a grace period for how long Pod Disruption Budget-protected workloads will be "
    "respected during upgrades. After this grace period, any workloads protected by Pod "
    "Disruption Budgets that have not been successfully drained from a node will be forcibly "
    "evicted"
)


def render_grace_period(period: GracePeriodValue) -> str:
    """Render a stored grace period, using hours from 60 minutes up."""
    value = int(period.value)
    unit = period.unit
    if value >= MINUTES_PER_HOUR:
        value = value // MINUTES_PER_HOUR
        unit = "hour" if value == 1 else "hours"
    return f"{value} {unit}"


def resolve_default(cluster: ClusterRecord, requested: Optional[str]) -> str:
    """Pick the grace period shown as default.

    The cluster's current setting wins unless the cluster has none or the
    user passed a value explicitly.
    """
    current = None
    if cluster.node_drain_grace_period is not None:
        current = render_grace_period(cluster.node_drain_grace_period)
    if current is None or requested is not None:
        return requested or DEFAULT_GRACE_PERIOD
    return current


def parse_grace_period(text: str) -> NodeDrainGracePeriod:
    """Parse '<number> <unit>' into a grace period."""
    parts = text.split() if text else []
    if len(parts) != 2:
        raise InvalidGracePeriodError(
            f"Expected a valid node drain grace period: '{text}' is not '<number> <unit>'"
        )

    raw_value, unit = parts
    try:
        value = float(raw_value)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        raise InvalidGracePeriodError(
            f"Expected a valid node drain grace period: '{raw_value}' is not a number"
        )
    if value < 0:
        raise InvalidGracePeriodError(
            f"Expected a valid node drain grace period: '{text}' is negative"
        )

    unit = unit.lower()
    if unit not in HOUR_UNITS + MINUTE_UNITS:
        raise InvalidGracePeriodError(
            f"Expected a valid node drain grace period: unit '{unit}' must be minutes or hours"
        )
    return NodeDrainGracePeriod(value=value, unit=unit)


def resolve_grace_period(
    cluster: ClusterRecord, requested: Optional[str], prompter: Prompter
) -> NodeDrainGracePeriod:
    """Resolve the grace period from the cluster, flags and, when enabled, a prompt."""
    grace_period = resolve_default(cluster, requested)
    if prompter.enabled:
        grace_period = prompter.ask(
            "Node draining",
            options=GRACE_PERIOD_OPTIONS,
            default=grace_period,
            required=True,
            help=GRACE_PERIOD_HELP,
        )
    return parse_grace_period(grace_period)
