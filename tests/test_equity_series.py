"""
Tests for EquitySeries

Tests cover:
- Seeding (single point and synthetic backfill)
- Sampling throttle
- Capacity / FIFO eviction
- Copy-on-read
"""

import random

import pytest

from dhan_dashboard.models.portfolio_models import EquityPoint
from dhan_dashboard.services.equity_series import EquitySeries

T0 = 1_767_000_000_000


@pytest.fixture
def series():
    return EquitySeries(capacity=600, min_interval_ms=5000, change_threshold=0.001, synthetic_seed=False)


# ============================================================
# Seeding Tests
# ============================================================

class TestSeeding:
    """Tests for the first observation."""

    def test_single_point_seed(self, series):
        assert series.observe(10000.0, T0)
        assert series.read() == (EquityPoint(t=T0, equity=10000.0),)

    def test_synthetic_seed_spacing(self):
        series = EquitySeries(synthetic_seed=True, rng=random.Random(42))

        series.observe(21000.0, T0)
        points = series.read()

        assert len(points) == 60
        assert points[-1] == EquityPoint(t=T0, equity=21000.0)
        assert points[0].t == T0 - 59 * 1000
        for prev, cur in zip(points, points[1:]):
            assert cur.t - prev.t == 1000

    def test_synthetic_seed_stays_near_baseline(self):
        series = EquitySeries(synthetic_seed=True, rng=random.Random(7))

        series.observe(10000.0, T0)

        for p in series.read():
            assert p.equity == pytest.approx(10000.0, rel=0.05)

    def test_synthetic_seed_respects_small_capacity(self):
        series = EquitySeries(capacity=10, synthetic_seed=True, rng=random.Random(1))

        series.observe(10000.0, T0)

        assert len(series) == 10
        assert series.last.t == T0


# ============================================================
# Sampling Throttle Tests
# ============================================================

class TestThrottle:
    """Tests for the admission rule."""

    def test_small_change_within_interval_dropped(self, series):
        series.observe(10000.0, T0)

        stored = series.observe(10005.0, T0 + 4999)

        assert not stored
        assert len(series) == 1

    def test_large_change_within_interval_appended(self, series):
        series.observe(10000.0, T0)

        assert series.observe(10011.0, T0 + 100)
        assert series.observe(9990.0, T0 + 200)
        assert len(series) == 3

    def test_interval_elapsed_always_appended(self, series):
        series.observe(10000.0, T0)

        assert series.observe(10000.0, T0 + 5000)
        assert series.last == EquityPoint(t=T0 + 5000, equity=10000.0)

    def test_throttle_measured_from_last_stored_point(self, series):
        series.observe(10000.0, T0)
        series.observe(10000.0, T0 + 3000)

        assert series.observe(10000.0, T0 + 5000)

    def test_out_of_order_observation_dropped(self, series):
        series.observe(10000.0, T0)

        assert not series.observe(20000.0, T0 - 1)
        assert len(series) == 1

    def test_append_applies_throttle(self, series):
        assert series.append(EquityPoint(t=T0, equity=100.0))
        assert not series.append(EquityPoint(t=T0 + 10, equity=100.05))


# ============================================================
# Capacity Tests
# ============================================================

class TestCapacity:
    """Tests for FIFO eviction."""

    def test_never_exceeds_capacity(self, series):
        for i in range(700):
            series.observe(10000.0 + i, T0 + i * 5000)

        points = series.read()
        assert len(points) == 600
        assert points[0].t == T0 + 100 * 5000
        assert points[-1].t == T0 + 699 * 5000

    def test_time_non_decreasing(self):
        series = EquitySeries(capacity=50, synthetic_seed=True, rng=random.Random(3))
        rng = random.Random(11)
        now = T0
        series.observe(10000.0, now)
        for _ in range(500):
            now += rng.choice([-2000, 0, 400, 1000, 6000])
            series.observe(10000.0 * rng.uniform(0.99, 1.01), now)

        points = series.read()
        assert len(points) <= 50
        assert all(a.t <= b.t for a, b in zip(points, points[1:]))


# ============================================================
# Read Tests
# ============================================================

class TestRead:
    """Tests for read/clear."""

    def test_read_is_a_copy(self, series):
        series.observe(10000.0, T0)

        points = series.read()
        assert isinstance(points, tuple)
        series.observe(12000.0, T0 + 1)

        assert len(points) == 1
        assert len(series.read()) == 2

    def test_clear_reseeds(self, series):
        series.observe(10000.0, T0)
        series.clear()

        assert series.read() == ()
        series.observe(500.0, T0 + 1)
        assert series.read() == (EquityPoint(t=T0 + 1, equity=500.0),)
