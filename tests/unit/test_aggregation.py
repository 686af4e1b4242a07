"""Unit tests for the Aggregation Engine.

Every metric is a sum of qty; null qty counts as 0; an empty project is 0%
without any division.
"""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from yetzira.core.aggregation import (
    ProjectMetrics,
    completed_units,
    compute_metrics,
    in_production_units,
    overall_progress,
    progress_percent,
    remaining_units,
    total_units,
    waiting_units,
)
from yetzira.models.records import Unit


class TestScenario:
    """complete x10, production x5, waiting x3."""

    def test_metrics(self, scenario_units: list[Unit]):
        m = compute_metrics(scenario_units)
        assert m == ProjectMetrics(
            total_units=18,
            completed_units=10,
            overall_progress=56,
            in_production_units=5,
            waiting_units=3,
            remaining_units=8,
        )

    def test_individual_functions_agree(self, scenario_units: list[Unit]):
        m = compute_metrics(scenario_units)
        assert total_units(scenario_units) == m.total_units
        assert completed_units(scenario_units) == m.completed_units
        assert overall_progress(scenario_units) == m.overall_progress
        assert in_production_units(scenario_units) == m.in_production_units
        assert waiting_units(scenario_units) == m.waiting_units
        assert remaining_units(scenario_units) == m.remaining_units

    def test_idempotent(self, scenario_units: list[Unit]):
        assert compute_metrics(scenario_units) == compute_metrics(scenario_units)

    def test_accepts_generators(self, scenario_units: list[Unit]):
        assert remaining_units(u for u in scenario_units) == 8
        assert overall_progress(u for u in scenario_units) == 56


class TestEdgeCases:
    def test_empty_collection(self):
        m = compute_metrics([])
        assert m.total_units == 0
        assert m.overall_progress == 0
        assert m.remaining_units == 0

    def test_null_qty_counts_as_zero(self, make_unit: Callable[..., Unit]):
        units = [
            make_unit(status="complete", qty=None),
            make_unit(status="production", qty=4),
        ]
        m = compute_metrics(units)
        assert m.total_units == 4
        assert m.completed_units == 0
        assert m.overall_progress == 0

    def test_all_null_qty_is_zero_percent(self, make_unit: Callable[..., Unit]):
        m = compute_metrics([make_unit(status="complete", qty=None)])
        assert m.total_units == 0
        assert m.overall_progress == 0

    def test_ready_cut_counts_as_in_production(self, make_unit: Callable[..., Unit]):
        units = [
            make_unit(status="ready-cut", qty=7),
            make_unit(status="production", qty=2),
        ]
        assert in_production_units(units) == 9

    def test_unknown_status_counts_toward_total_only(self, make_unit: Callable[..., Unit]):
        units = [make_unit(status="on-hold", qty=5), make_unit(status="complete", qty=5)]
        m = compute_metrics(units)
        assert m.total_units == 10
        assert m.completed_units == 5
        assert m.in_production_units == 0
        assert m.waiting_units == 0
        assert m.remaining_units == 5

    def test_customs_is_not_in_production_or_waiting(self, make_unit: Callable[..., Unit]):
        m = compute_metrics([make_unit(status="customs", qty=6)])
        assert m.in_production_units == 0
        assert m.waiting_units == 0
        assert m.remaining_units == 6

    def test_all_complete_is_hundred(self, make_unit: Callable[..., Unit]):
        units = [make_unit(status="complete", qty=3), make_unit(status="complete", qty=9)]
        assert overall_progress(units) == 100


class TestRounding:
    """Halves round up; documented and pinned here."""

    def test_half_rounds_up(self):
        # 1/8 = 12.5%
        assert progress_percent(1, 8) == 13

    def test_another_half_rounds_up(self):
        # 5/8 = 62.5%; banker's rounding would give 62
        assert progress_percent(5, 8) == 63

    def test_below_half_rounds_down(self):
        # 1/3 = 33.33%
        assert progress_percent(1, 3) == 33

    def test_zero_total(self):
        assert progress_percent(0, 0) == 0

    def test_via_units(self, make_unit: Callable[..., Unit]):
        units = [make_unit(status="complete", qty=1), make_unit(status="waiting", qty=7)]
        assert overall_progress(units) == 13


class TestProperties:
    """Invariants over randomly generated collections."""

    STATUSES = ["waiting", "customs", "ready-cut", "production", "complete", "junk"]

    @pytest.mark.parametrize("seed", range(25))
    def test_bounds_and_commutativity(self, seed: int, make_unit: Callable[..., Unit]):
        rng = random.Random(seed)
        units = [
            make_unit(
                status=rng.choice(self.STATUSES),
                qty=rng.choice([None, 0, rng.randint(1, 50)]),
            )
            for _ in range(rng.randint(0, 15))
        ]
        m = compute_metrics(units)

        assert 0 <= m.completed_units <= m.total_units
        assert 0 <= m.overall_progress <= 100
        assert m.remaining_units == m.total_units - m.completed_units >= 0
        assert m.total_units == sum(u.qty or 0 for u in units)

        shuffled = list(units)
        rng.shuffle(shuffled)
        assert compute_metrics(shuffled) == m
