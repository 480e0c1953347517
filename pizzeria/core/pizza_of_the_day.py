"""Pizza of the Day — deterministic daily pick from the catalog.

Invariants:
    - Same (pizza_types order, now) -> same pick; no randomness
    - Changes once per UTC day boundary counted from the Unix epoch
    - Cycles through every type with period len(pizza_types)
    - Empty catalog raises EmptyCatalogError (never ZeroDivisionError)
"""

from collections.abc import Sequence
from datetime import datetime, timezone

from pizzeria.core.domain_types import PizzaType
from pizzeria.core.errors import EmptyCatalogError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MS_PER_DAY = 86_400_000


def days_since_epoch(now: datetime) -> int:
    """floor(epoch_ms / 86_400_000). Naive datetimes are taken as UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    # timedelta normalizes to floored days, exact for pre-epoch instants too
    return (now - EPOCH).days


def select_pizza_of_the_day(
    pizza_types: Sequence[PizzaType], now: datetime,
) -> PizzaType:
    if not pizza_types:
        raise EmptyCatalogError()
    return pizza_types[days_since_epoch(now) % len(pizza_types)]
