"""Tests for DurationStrategy: bucket selection, adjustments and optimization summary."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from selection_engine.duration import DurationStrategy, nearest_supported_duration
from selection_engine.models.duration import StrategyParams
from selection_engine.models.enums import SUPPORTED_DURATIONS


class TestSelectStrategy:
    def setup_method(self) -> None:
        self.strategy = DurationStrategy()

    def test_unsupported_duration_snaps_to_nearest(self) -> None:
        result = self.strategy.select_strategy(StrategyParams(duration=22))
        assert result.adjusted_duration == 20
        assert result.config.name == "Focused"
        assert result.is_exact_match is False
        assert "22min not directly supported" in result.adjustment_reason
        alternatives = [c.duration for c in result.alternative_options]
        assert alternatives == [15, 30, 10]

    def test_exact_match_without_adjustment(self) -> None:
        result = self.strategy.select_strategy(StrategyParams(duration=30))
        assert result.adjusted_duration == 30
        assert result.is_exact_match is True
        assert result.adjustment_reason is None

    @pytest.mark.parametrize("duration", SUPPORTED_DURATIONS)
    def test_every_supported_duration_is_exact(self, duration: int) -> None:
        result = self.strategy.select_strategy(StrategyParams(duration=duration))
        assert result.is_exact_match is True
        assert result.adjusted_duration == duration

    def test_beginner_capped_at_30(self) -> None:
        params = StrategyParams(duration=45, fitness_level="new to exercise")
        result = self.strategy.select_strategy(params)
        assert result.adjusted_duration == 30
        assert result.adjustment_reason == "adjusted down for beginner-friendly duration"
        assert "Duration adjusted down for beginner-friendly duration" in result.recommendations

    def test_novice_counts_as_beginner(self) -> None:
        result = self.strategy.select_strategy(StrategyParams(duration=45, fitness_level="novice"))
        assert result.adjusted_duration <= 30

    def test_low_energy_steps_down(self) -> None:
        result = self.strategy.select_strategy(StrategyParams(duration=45, energy_level=2))
        assert result.adjusted_duration == 30
        assert result.adjustment_reason == "adjusted down due to low energy level (2/10)"

    def test_low_energy_floor(self) -> None:
        result = self.strategy.select_strategy(StrategyParams(duration=10, energy_level=1))
        assert result.adjusted_duration == 10
        assert result.adjustment_reason is None

    def test_high_soreness_steps_down_to_floor(self) -> None:
        sore = ("legs", "back", "shoulders")
        result = self.strategy.select_strategy(StrategyParams(duration=20, soreness_areas=sore))
        assert result.adjusted_duration == 15
        assert "high soreness (3 areas)" in result.adjustment_reason
        floored = self.strategy.select_strategy(StrategyParams(duration=15, soreness_areas=sore))
        assert floored.adjusted_duration == 15

    def test_adjustments_compose_in_order(self) -> None:
        params = StrategyParams(
            duration=50,
            fitness_level="beginner",
            energy_level=3,
            soreness_areas=("legs", "back", "core"),
        )
        result = self.strategy.select_strategy(params)
        # 50 → 45, low energy → 30, soreness → 20
        assert result.adjusted_duration == 20
        assert result.adjustment_reason == (
            "50min not directly supported; "
            "adjusted down due to low energy level (3/10); "
            "adjusted down due to high soreness (3 areas)"
        )

    def test_adjustments_never_increase(self) -> None:
        for duration in (1, 7, 12, 22, 33, 45, 120):
            for energy in (1, 5, 10):
                params = StrategyParams(duration=duration, energy_level=energy, fitness_level="beginner")
                result = self.strategy.select_strategy(params)
                assert result.adjusted_duration in SUPPORTED_DURATIONS
                assert result.adjusted_duration <= nearest_supported_duration(duration)

    def test_context_recommendations(self) -> None:
        params = StrategyParams(duration=5, energy_level=9, fitness_level="advanced athlete")
        recommendations = self.strategy.select_strategy(params).recommendations
        assert any(r.startswith("High energy level (9/10)") for r in recommendations)
        assert any(r.startswith("Short 5min workout") for r in recommendations)
        assert "Body weight workout - focus on form and controlled movements" in recommendations
        assert any(r.startswith("Advanced level") for r in recommendations)


class TestValidateStrategy:
    def setup_method(self) -> None:
        self.strategy = DurationStrategy()

    def test_result_is_valid(self) -> None:
        params = StrategyParams(duration=22)
        assert self.strategy.validate_strategy(self.strategy.select_strategy(params), params)

    def test_tampered_result_is_invalid(self, caplog: pytest.LogCaptureFixture) -> None:
        params = StrategyParams(duration=22)
        result = self.strategy.select_strategy(params)
        with caplog.at_level(logging.WARNING):
            assert not self.strategy.validate_strategy(
                dataclasses.replace(result, adjusted_duration=25), params
            )
        assert "not supported" in caplog.text

    def test_mismatched_config_is_invalid(self) -> None:
        params = StrategyParams(duration=22)
        result = self.strategy.select_strategy(params)
        other = self.strategy.select_strategy(StrategyParams(duration=45))
        assert not self.strategy.validate_strategy(
            dataclasses.replace(result, config=other.config), params
        )

    def test_large_adjustment_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        params = StrategyParams(duration=120)
        result = self.strategy.select_strategy(params)
        with caplog.at_level(logging.INFO):
            assert self.strategy.validate_strategy(result, params)
        assert "Large adjustment" in caplog.text


class TestDurationOptimization:
    def setup_method(self) -> None:
        self.strategy = DurationStrategy()

    def test_exact_request_is_optimal(self) -> None:
        params = StrategyParams(duration=30)
        optimization = self.strategy.create_duration_optimization(
            params, self.strategy.select_strategy(params)
        )
        assert optimization.is_optimal is True
        assert optimization.actual_duration == 30
        assert optimization.alternative_durations == (5, 10, 15, 20, 45)
        allocation = optimization.phase_allocation
        assert allocation.warmup_minutes == pytest.approx(3.9)
        assert allocation.main_minutes == pytest.approx(22.2)
        assert allocation.cooldown_minutes == pytest.approx(3.9)
        assert allocation.as_seconds() == {"warmup": 234, "main": 1332, "cooldown": 234}

    def test_adjusted_request_is_not_optimal(self) -> None:
        params = StrategyParams(duration=22)
        optimization = self.strategy.create_duration_optimization(
            params, self.strategy.select_strategy(params)
        )
        assert optimization.is_optimal is False
        assert optimization.recommendations[0] == (
            "Adjusted from 22min to 20min for optimal workout structure"
        )

    def test_minimal_bucket_recommendation(self) -> None:
        params = StrategyParams(duration=5)
        optimization = self.strategy.create_duration_optimization(
            params, self.strategy.select_strategy(params)
        )
        assert optimization.recommendations == (
            "Simple structure with 4 exercises for time efficiency",
        )

    def test_supported_durations(self) -> None:
        assert DurationStrategy.get_supported_durations() == (5, 10, 15, 20, 30, 45)
        assert DurationStrategy.get_duration_config(33).duration == 30
