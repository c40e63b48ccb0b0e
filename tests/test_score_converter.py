"""Tests for conversion of raw round points onto the standard scale."""

import logging

import pytest

from quizboard.core.models import QuizConfig, RoundDescriptor
from quizboard.core.services.score_converter import convert_points, converted_max_score

ROUND_A = RoundDescriptor(id=1, sequence_nr=1, max_score=20)
ROUND_B = RoundDescriptor(id=2, sequence_nr=2, max_score=10, exclude_from_scale=True)


class TestConvertPoints:
    """Tests for convert_points."""

    def test_rescales_included_round(self, scaled_config: QuizConfig) -> None:
        assert convert_points(10, ROUND_A, scaled_config) == pytest.approx(5.0)

    def test_excluded_round_keeps_raw_points(self, scaled_config: QuizConfig) -> None:
        assert convert_points(5, ROUND_B, scaled_config) == 5

    @pytest.mark.parametrize("points", [0, 1, 7.5, 20])
    def test_disabled_conversion_is_identity(self, points: float) -> None:
        assert convert_points(points, ROUND_A, QuizConfig()) == points

    @pytest.mark.parametrize("standard_scale", [None, 0, -5])
    def test_missing_or_non_positive_scale_is_identity(self, standard_scale: float | None) -> None:
        config = QuizConfig(scale_conversion_enabled=True, standard_scale=standard_scale)
        assert convert_points(12, ROUND_A, config) == 12

    def test_zero_max_score_returns_raw_points(self, scaled_config: QuizConfig) -> None:
        round_ = RoundDescriptor(id=9, sequence_nr=1, max_score=0)
        assert convert_points(4, round_, scaled_config) == 4

    def test_tiebreak_round_is_never_scaled(self, scaled_config: QuizConfig) -> None:
        round_ = RoundDescriptor(id=3, sequence_nr=3, max_score=100, is_tiebreak_round=True)
        assert convert_points(42, round_, scaled_config) == 42

    def test_points_above_max_are_clamped(
        self, scaled_config: QuizConfig, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            assert convert_points(25, ROUND_A, scaled_config) == pytest.approx(10.0)
        assert "Clamped" in caplog.text

    def test_negative_points_are_clamped_to_zero(self, scaled_config: QuizConfig) -> None:
        assert convert_points(-3, ROUND_A, scaled_config) == 0
        assert convert_points(-3, ROUND_A, QuizConfig()) == 0


class TestConvertedMaxScore:
    """Tests for converted_max_score."""

    def test_converted_round_contributes_standard_scale(self, scaled_config: QuizConfig) -> None:
        assert converted_max_score(ROUND_A, scaled_config) == 10

    def test_excluded_round_contributes_its_own_max(self, scaled_config: QuizConfig) -> None:
        assert converted_max_score(ROUND_B, scaled_config) == 10
        assert converted_max_score(ROUND_A, QuizConfig()) == 20
