"""Tests for ConfidenceService: weighted scoring, levels and configuration checks."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from selection_engine.confidence import ConfidenceService, validate_config
from selection_engine.confidence.calculators import FactorCalculator, default_calculators
from selection_engine.confidence.service import assess_data_quality
from selection_engine.exceptions import ConfigurationError
from selection_engine.models.confidence import ConfidenceConfig, ConfidenceThresholds
from selection_engine.models.context import AnalysisContext, UserProfile
from selection_engine.models.enums import ConfidenceLevel
from selection_engine.models.plan import GeneratedPlan


class _FixedCalculator(FactorCalculator):
    description = "fixed"
    weight = 0.2

    def __init__(self, factor_name: str, value: float) -> None:
        self.factor_name = factor_name
        self.value = value

    def calculate(self, profile, plan, context) -> float:
        return self.value


class _BrokenCalculator(FactorCalculator):
    factor_name = "equipment_fit"
    weight = 0.15
    description = "always fails"

    def calculate(self, profile, plan, context) -> float:
        raise RuntimeError("boom")


def _with(replacement: FactorCalculator) -> list[FactorCalculator]:
    return [
        replacement if c.factor_name == replacement.factor_name else c
        for c in default_calculators()
    ]


class TestValidateConfig:
    def test_default_config_is_valid(self) -> None:
        validate_config(ConfidenceConfig())

    def test_missing_weight(self) -> None:
        weights = dict(ConfidenceConfig().weights)
        del weights["equipment_fit"]
        with pytest.raises(ConfigurationError, match="Missing"):
            validate_config(ConfidenceConfig(weights=weights))

    def test_unknown_weight(self) -> None:
        weights = {**ConfidenceConfig().weights, "vibes": 0.0}
        with pytest.raises(ConfigurationError, match="Unknown"):
            validate_config(ConfidenceConfig(weights=weights))

    def test_weights_must_sum_to_one(self) -> None:
        weights = {**ConfidenceConfig().weights, "profile_match": 0.5}
        with pytest.raises(ConfigurationError, match="sum to 1.0"):
            ConfidenceService(ConfidenceConfig(weights=weights))

    def test_negative_weight(self) -> None:
        weights = {**ConfidenceConfig().weights, "profile_match": -0.05, "safety_alignment": 0.5}
        with pytest.raises(ConfigurationError, match="Negative"):
            validate_config(ConfidenceConfig(weights=weights))

    def test_thresholds_must_be_ordered(self) -> None:
        config = ConfidenceConfig(thresholds=ConfidenceThresholds(excellent=0.5, good=0.6, fair=0.4))
        with pytest.raises(ConfigurationError):
            validate_config(config)

    def test_missing_calculator(self) -> None:
        with pytest.raises(ConfigurationError, match="calculators"):
            ConfidenceService(calculators=default_calculators()[:4])


class TestCalculateConfidence:
    def setup_method(self) -> None:
        self.service = ConfidenceService()
        self.context = AnalysisContext()

    def test_empty_plan_is_scored(self) -> None:
        result = self.service.calculate_confidence(UserProfile(), GeneratedPlan(), self.context)
        # 0.25*0.875 + 0.20*0.5 + 0.15*1.0 + 0.20*0.7 + 0.20*0.1
        assert 0.0 < result.overall_score <= 1.0
        assert result.overall_score == pytest.approx(0.62875)
        assert result.level == ConfidenceLevel.GOOD
        assert result.factors.structure_quality == 0.1

    def test_overall_is_weighted_sum(
        self, intermediate_profile: UserProfile, strength_plan: GeneratedPlan
    ) -> None:
        result = self.service.calculate_confidence(intermediate_profile, strength_plan, self.context)
        weights = result.metadata.factor_weights
        expected = sum(weights[name] * score for name, score in result.factors.as_dict().items())
        assert result.overall_score == pytest.approx(expected)
        assert all(0.1 <= s <= 1.0 for s in result.factors.as_dict().values())

    def test_well_matched_plan_is_excellent(
        self, intermediate_profile: UserProfile, strength_plan: GeneratedPlan
    ) -> None:
        result = self.service.calculate_confidence(intermediate_profile, strength_plan, self.context)
        assert result.level == ConfidenceLevel.EXCELLENT
        assert result.recommendations == ("This workout is excellently matched to your profile",)

    def test_weak_factors_get_recommendations(self) -> None:
        result = self.service.calculate_confidence(UserProfile(), GeneratedPlan(), self.context)
        assert result.recommendations[0] == "This workout is well-suited to your needs"
        assert len(result.recommendations) == 3  # safety 0.5, structure 0.1

    def test_metadata(self) -> None:
        result = self.service.calculate_confidence(UserProfile(), GeneratedPlan(), self.context)
        assert result.metadata.version == "1.0.0"
        assert result.metadata.calculation_time_ms >= 0.0
        assert result.metadata.data_quality == pytest.approx(1 / 7)

    def test_failing_calculator_scores_floor(
        self, strength_plan: GeneratedPlan, caplog: pytest.LogCaptureFixture
    ) -> None:
        service = ConfidenceService(calculators=_with(_BrokenCalculator()))
        with caplog.at_level(logging.WARNING):
            result = service.calculate_confidence(UserProfile(), strength_plan, self.context)
        assert result.factors.equipment_fit == 0.1
        assert "equipment_fit" in caplog.text

    def test_out_of_range_score_clamped(self, strength_plan: GeneratedPlan) -> None:
        service = ConfidenceService(calculators=_with(_FixedCalculator("goal_alignment", 1.7)))
        result = service.calculate_confidence(UserProfile(), strength_plan, self.context)
        assert result.factors.goal_alignment == 1.0

    def test_levels_follow_thresholds(self) -> None:
        calculators = [_FixedCalculator(name, 0.45) for name in ConfidenceConfig().weights]
        result = ConfidenceService(calculators=calculators).calculate_confidence(
            UserProfile(), GeneratedPlan(), self.context
        )
        assert result.overall_score == pytest.approx(0.45)
        assert result.level == ConfidenceLevel.FAIR

    def test_detailed_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        service = ConfidenceService(ConfidenceConfig(detailed_logging=True))
        with caplog.at_level(logging.INFO):
            service.calculate_confidence(UserProfile(), GeneratedPlan(), self.context)
        assert "Confidence 0.629 (good)" in caplog.text


class TestFactorBreakdown:
    def test_breakdown_matches_result(
        self, intermediate_profile: UserProfile, strength_plan: GeneratedPlan
    ) -> None:
        service = ConfidenceService()
        context = AnalysisContext()
        breakdown = service.get_factor_breakdown(intermediate_profile, strength_plan, context)
        result = service.calculate_confidence(intermediate_profile, strength_plan, context)

        assert [b.factor_name for b in breakdown] == list(result.factors.as_dict())
        total = np.sum([b.weighted_score for b in breakdown])
        assert float(total) == pytest.approx(result.overall_score)
        for item in breakdown:
            assert item.weighted_score == pytest.approx(item.score * item.weight)
            assert item.description


class TestDataQuality:
    def test_complete_inputs(
        self, intermediate_profile: UserProfile, strength_plan: GeneratedPlan
    ) -> None:
        assert assess_data_quality(intermediate_profile, strength_plan) == 1.0

    def test_floor(self) -> None:
        profile = UserProfile(fitness_level="")
        assert assess_data_quality(profile, GeneratedPlan()) == 0.1
