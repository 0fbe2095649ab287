"""Tests for the schedule planner facade."""

from __future__ import annotations

import datetime as dt
import logging

import pytest

from matchday import plan_schedule
from matchday.engine.planner import SchedulePlanner
from matchday.errors import InvalidConfiguration, InvalidInput
from matchday.models import ScheduleConfig, ScheduleFormat, TeamRef


@pytest.fixture
def config() -> ScheduleConfig:
    return ScheduleConfig(
        start_date=dt.date(2025, 1, 6),
        format=ScheduleFormat.DOUBLE,
        time_slots=("18:00", "20:00"),
        venue_overrides={"A": "National Arena"},
    )


class TestPlanSchedule:
    def test_full_pipeline(self, config):
        plan = plan_schedule(["A", "B", "C", "D"], config)
        assert len(plan.fixtures) == 12
        assert len(plan.matches) == 12
        assert plan.is_valid
        assert plan.total_rounds == 6
        assert plan.summary.venue_distribution["National Arena"] == 3

    def test_odd_team_count(self, config):
        plan = plan_schedule([TeamRef(id=x) for x in "ABCDE"], config)
        assert len(plan.matches) == 20
        assert plan.report.valid

    def test_single_format_from_config(self, config):
        plan = plan_schedule(["A", "B", "C"], config.with_overrides(format="single"))
        assert len(plan.matches) == 3
        assert plan.report.statistics["expected_matches_per_team"] == 2

    def test_seed_from_config_is_reproducible(self, config):
        seeded = config.with_overrides(seed=5, format="single")
        teams = [f"T{i}" for i in range(8)]
        first = plan_schedule(teams, seeded)
        second = plan_schedule(teams, seeded)
        assert first.matches == second.matches

    def test_errors_propagate(self, config):
        with pytest.raises(InvalidInput):
            plan_schedule(["A"], config)
        with pytest.raises(InvalidConfiguration):
            plan_schedule(["A", "B"], ScheduleConfig())

    def test_logs_plan_summary(self, config, caplog):
        with caplog.at_level(logging.INFO, logger="matchday"):
            plan_schedule(["A", "B", "C", "D"], config)
        assert "Planned double round-robin" in caplog.text


class TestStrictPlanner:
    def test_strict_passes_valid_schedule(self, config):
        planner = SchedulePlanner(config, strict=True)
        assert planner.plan(["A", "B", "C", "D"]).is_valid

    def test_strict_raises_on_invalid_schedule(self, config, monkeypatch):
        from matchday.engine import planner as planner_module

        # Lose one fixture between generation and materialization
        original = planner_module.materialize_schedule
        monkeypatch.setattr(
            planner_module, "materialize_schedule",
            lambda fixtures, cfg: original(fixtures[1:], cfg),
        )
        with pytest.raises(InvalidInput, match="invalid"):
            SchedulePlanner(config, strict=True).plan(["A", "B", "C", "D"])
