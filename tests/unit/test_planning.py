"""Layer 2 (복잡도 산정, 일정 합성) 단위 테스트."""

from datetime import date, datetime, timedelta

import pytest

from docuforge.layers.layer2_planning import (
    MIN_TOTAL_DAYS,
    complexity_level,
    phase_durations,
    score_complexity,
    synthesize_phases,
    total_days_until,
)
from docuforge.models import Project


def make_project(features: int = 0, tech: int = 0, audience: str = "") -> Project:
    return Project(
        name="Sized",
        core_features=[f"Feature {i}" for i in range(features)],
        tech_stack=[f"Tech {i}" for i in range(tech)],
        target_audience=audience,
        launch_date=date(2027, 6, 1),
    )


class TestComplexity:
    def test_empty_project_is_minimal(self):
        complexity = score_complexity(make_project())
        assert complexity.level == 1
        assert complexity.description == "minimal"
        assert complexity.development_effort == "1-2 weeks"
        assert complexity.recommended_approach == "Rapid prototyping with minimal planning phase"

    def test_medium_counts_add_one_each(self):
        assert complexity_level(6, 5, "") == 3

    def test_high_counts_add_two_each(self):
        assert complexity_level(11, 9, "") == 5

    def test_professional_audience_adds_one(self):
        assert complexity_level(0, 0, "Professional designers") == 2
        assert complexity_level(0, 0, "Enterprise IT") == 2

    def test_level_capped_at_five(self):
        complexity = score_complexity(make_project(features=11, tech=9, audience="enterprise"))
        assert complexity.level == 5
        assert complexity.description == "high"
        assert complexity.development_effort == "3+ months"

    def test_boundaries_are_exclusive(self):
        assert complexity_level(5, 4, "") == 1
        assert complexity_level(10, 8, "") == 3


class TestTotalDays:
    def test_future_launch_date(self):
        assert total_days_until(date(2027, 4, 11), today=date(2027, 1, 1)) == 100

    def test_short_horizon_uses_minimum(self):
        assert total_days_until(date(2027, 1, 11), today=date(2027, 1, 1)) == MIN_TOTAL_DAYS

    def test_past_launch_date_uses_minimum(self):
        assert total_days_until(date(2026, 1, 1), today=date(2027, 1, 1)) == MIN_TOTAL_DAYS


class TestPhaseDurations:
    def test_hundred_days(self):
        assert phase_durations(100) == (20, 50, 20, 10)

    def test_thirty_days(self):
        assert phase_durations(30) == (6, 15, 6, 3)

    def test_half_rounds_up(self):
        # 45 * 0.5 = 22.5 → 23
        assert phase_durations(45) == (9, 23, 9, 4)

    def test_minimums_applied(self):
        planning, development, testing, _ = phase_durations(20)
        assert (planning, development, testing) == (5, 10, 5)

    def test_deployment_never_negative(self):
        assert phase_durations(10)[3] == 0

    @pytest.mark.parametrize("total", [30, 31, 33, 45, 99, 100, 365])
    def test_durations_sum_to_total(self, total):
        assert sum(phase_durations(total)) == total


class TestSynthesizePhases:
    START = datetime(2027, 1, 1, 9, 0)

    def test_four_phases_in_order(self):
        phases = synthesize_phases(100, ["A", "B", "C", "D"], start=self.START)
        assert [p.name for p in phases] == [
            "Planning & Design",
            "Development",
            "Testing & Refinement",
            "Deployment & Launch",
        ]
        assert [p.duration_days for p in phases] == [20, 50, 20, 10]

    def test_phases_are_contiguous(self):
        phases = synthesize_phases(100, ["A"], start=self.START)
        assert phases[0].start_date == self.START
        for previous, current in zip(phases, phases[1:]):
            assert current.start_date == previous.end_date
        assert phases[-1].end_date == self.START + timedelta(days=100)

    def test_development_deliverables_from_features(self):
        phases = synthesize_phases(100, ["A", "B", "C", "D"], start=self.START)
        assert phases[1].deliverables == ["Implementation of: A"]

    def test_development_deliverables_third_of_features(self):
        features = [f"F{i}" for i in range(9)]
        phases = synthesize_phases(100, features, start=self.START)
        assert phases[1].deliverables == [
            "Implementation of: F0",
            "Implementation of: F1",
            "Implementation of: F2",
        ]

    def test_no_features_no_development_deliverables(self):
        phases = synthesize_phases(30, [], start=self.START)
        assert phases[1].deliverables == []

    def test_fixed_deliverables(self):
        phases = synthesize_phases(30, [], start=self.START)
        assert "Development roadmap" in phases[0].deliverables
        assert "User acceptance testing" in phases[2].deliverables
        assert "App store submission" in phases[3].deliverables


def test_complexity_monotonic_in_counts():
    """기능/스택 수가 늘어나면 등급이 내려가지 않아야 한다."""
    for audience in ("", "Enterprise clients"):
        previous = 0
        for count in range(0, 15):
            level = complexity_level(count, count, audience)
            assert 1 <= level <= 5
            assert level >= previous
            previous = level
