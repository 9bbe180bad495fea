"""
Dhan Dashboard - Equity Series Buffer

Bounded, time-sampled history of total account equity, fed by every
poll of the equity endpoint. A new point is stored only when equity
moved by more than the change threshold or enough time has passed
since the last stored point.

Core responsibilities:
- Seed the series on the first observation (single point or synthetic backfill)
- Throttle sampling density on later observations
- Evict oldest points beyond capacity (FIFO)
- Hand out immutable copies of the series
"""

import logging
import random
from collections import deque
from typing import Deque, Optional, Tuple

from dhan_dashboard.config import settings
from dhan_dashboard.models.portfolio_models import EquityPoint
from dhan_dashboard.utils.date_utils import format_ms_ist

logger = logging.getLogger(__name__)

SEED_POINTS = 60
SEED_SPACING_MS = 1000
SEED_WALK_PCT = 0.0005  # max step of the synthetic random walk


class EquitySeries:
    """
    Append-only equity series with capacity-bounded FIFO eviction.

    All mutation happens on the event loop thread and no method awaits,
    so append-and-evict runs as one uninterrupted step.
    """

    def __init__(
        self,
        capacity: Optional[int] = None,
        min_interval_ms: Optional[int] = None,
        change_threshold: Optional[float] = None,
        synthetic_seed: Optional[bool] = None,
        seed_points: int = SEED_POINTS,
        seed_spacing_ms: int = SEED_SPACING_MS,
        rng: Optional[random.Random] = None
    ):
        self.capacity = capacity if capacity is not None else settings.equity_series_capacity
        self.min_interval_ms = (
            min_interval_ms if min_interval_ms is not None else settings.equity_min_interval_ms
        )
        self.change_threshold = (
            change_threshold if change_threshold is not None else settings.equity_change_threshold
        )
        self.synthetic_seed = (
            synthetic_seed if synthetic_seed is not None else settings.equity_synthetic_seed
        )
        self.seed_points = seed_points
        self.seed_spacing_ms = seed_spacing_ms
        self._rng = rng or random.Random()
        self._points: Deque[EquityPoint] = deque()

    def __len__(self) -> int:
        return len(self._points)

    @property
    def last(self) -> Optional[EquityPoint]:
        return self._points[-1] if self._points else None

    def read(self) -> Tuple[EquityPoint, ...]:
        """Current series, oldest first, as an immutable copy."""
        return tuple(self._points)

    def clear(self) -> None:
        self._points.clear()

    def should_admit(self, point: EquityPoint) -> bool:
        """
        Sampling throttle against the last stored point.

        Admit if |equity - last| > threshold * last, or if at least
        min_interval_ms elapsed. Points older than the last are rejected.
        """
        last = self.last
        if last is None:
            return True
        if point.t < last.t:
            return False

        time_diff = point.t - last.t
        equity_diff = abs(point.equity - last.equity)
        return equity_diff > last.equity * self.change_threshold or time_diff >= self.min_interval_ms

    def append(self, point: EquityPoint) -> bool:
        """
        Store a point if the throttle admits it.

        Returns:
            True if the point was stored.
        """
        if not self.should_admit(point):
            return False

        self._points.append(point)
        while len(self._points) > self.capacity:
            self._points.popleft()
        return True

    def seed(self, equity: float, now_ms: int) -> None:
        """
        Initialise an empty series.

        Single-point mode stores {now, equity}. Synthetic mode backfills
        `seed_points` points spaced `seed_spacing_ms` apart ending at
        `now_ms`, walking randomly back from the observed equity.
        """
        if not self.synthetic_seed:
            self._points.append(EquityPoint(t=now_ms, equity=equity))
            return

        values = [equity]
        for _ in range(self.seed_points - 1):
            step = self._rng.uniform(-SEED_WALK_PCT, SEED_WALK_PCT)
            values.append(values[-1] * (1 + step))
        values.reverse()

        start = now_ms - (self.seed_points - 1) * self.seed_spacing_ms
        for i, value in enumerate(values):
            self._points.append(EquityPoint(t=start + i * self.seed_spacing_ms, equity=value))
        while len(self._points) > self.capacity:
            self._points.popleft()

        logger.info(
            f"Seeded equity series with {len(self._points)} synthetic points "
            f"ending {format_ms_ist(now_ms)}"
        )

    def observe(self, equity: float, now_ms: int) -> bool:
        """
        Feed one equity observation.

        Returns:
            True if the series changed.
        """
        if not self._points:
            self.seed(equity, now_ms)
            return True

        stored = self.append(EquityPoint(t=now_ms, equity=equity))
        if not stored:
            logger.debug(f"Equity observation {equity} at {now_ms} throttled")
        return stored


# Global series instance
equity_series = EquitySeries()
