"""Tests for the score manager and the quiz records it validates."""

import pytest

from quizboard.core.score_manager import ScoreManager


@pytest.fixture
def populated(manager: ScoreManager) -> ScoreManager:
    manager.update_config(scale_conversion_enabled=True, standard_scale=10)
    manager.add_round("A", 20)
    manager.add_round("B", 10, exclude_from_scale=True)
    manager.add_round("Ex Aequo", 100, is_tiebreak_round=True)
    manager.add_team("Team X")
    manager.add_team("Team Y")
    return manager


class TestConfiguration:
    def test_defaults(self, manager) -> None:
        config = manager.get_config()
        assert not config.scale_conversion_enabled
        assert config.gradient_enabled
        assert config.ex_aequo_target_value is None

    def test_partial_update(self, manager) -> None:
        config = manager.update_config(ex_aequo_enabled=True, ex_aequo_target_value=7)
        assert config.ex_aequo_enabled
        assert config.ex_aequo_target_value == 7
        assert config.gradient_enabled

    def test_unknown_field_is_rejected(self, manager) -> None:
        with pytest.raises(ValueError, match="Unknown configuration"):
            manager.update_config(colour="red")

    def test_negative_standard_scale_is_rejected(self, manager) -> None:
        with pytest.raises(ValueError):
            manager.update_config(standard_scale=-1)


class TestRounds:
    def test_rounds_are_numbered_in_order(self, populated) -> None:
        assert [(r.title, r.sequence_nr) for r in populated.get_rounds()] == [
            ("A", 1),
            ("B", 2),
            ("Ex Aequo", 3),
        ]

    def test_blank_title_gets_default(self, manager) -> None:
        assert manager.add_round("  ", 10).title == "Round 1"

    @pytest.mark.parametrize("max_score", [0, -5, "10", True])
    def test_invalid_max_score(self, manager, max_score) -> None:
        with pytest.raises(ValueError):
            manager.add_round("Bad", max_score)

    def test_second_tiebreak_round_is_rejected(self, populated) -> None:
        with pytest.raises(ValueError, match="tiebreak"):
            populated.add_round("Another", 10, is_tiebreak_round=True)
        round_b = populated.get_rounds()[1]
        with pytest.raises(ValueError):
            populated.update_round(round_b.id, is_tiebreak_round=True)

    def test_lowering_max_below_recorded_points_is_rejected(self, populated) -> None:
        round_a = populated.get_rounds()[0]
        team = populated.get_teams()[0]
        populated.record_score(round_a.id, team.id, 15)
        with pytest.raises(ValueError):
            populated.update_round(round_a.id, max_score=10)
        assert populated.update_round(round_a.id, max_score=15).max_score == 15

    def test_delete_round_renumbers_and_drops_scores(self, populated) -> None:
        round_a, round_b, _ = populated.get_rounds()
        team = populated.get_teams()[0]
        populated.record_score(round_a.id, team.id, 4)
        populated.delete_round(round_a.id)
        assert [r.sequence_nr for r in populated.get_rounds()] == [1, 2]
        assert populated.get_rounds()[0].id == round_b.id
        assert populated.get_score(round_a.id, team.id) is None

    def test_move_round(self, populated) -> None:
        rounds = populated.move_round(populated.get_rounds()[2].id, 0)
        assert [r.title for r in rounds] == ["Ex Aequo", "A", "B"]
        assert [r.sequence_nr for r in rounds] == [1, 2, 3]

    def test_unknown_round(self, manager) -> None:
        with pytest.raises(KeyError):
            manager.delete_round(42)


class TestTeams:
    def test_display_numbers(self, populated) -> None:
        assert [(t.name, t.display_nr) for t in populated.get_teams()] == [("Team X", 1), ("Team Y", 2)]

    def test_name_is_required(self, manager) -> None:
        with pytest.raises(ValueError):
            manager.add_team("   ")

    def test_move_and_delete_keep_numbers_contiguous(self, manager) -> None:
        for name in ("A", "B", "C"):
            manager.add_team(name)
        teams = manager.move_team(manager.get_teams()[0].id, 2)
        assert [t.name for t in teams] == ["B", "C", "A"]
        manager.delete_team(teams[0].id)
        assert [(t.name, t.display_nr) for t in manager.get_teams()] == [("C", 1), ("A", 2)]

    def test_excluded_team_leaves_the_ranking(self, populated) -> None:
        team_y = populated.get_teams()[1]
        populated.set_team_excluded(team_y.id, True)
        assert [r.name for r in populated.get_ranking()] == ["Team X"]
        populated.set_team_excluded(team_y.id, False)
        assert len(populated.get_ranking()) == 2


class TestScores:
    def test_record_replaces_previous_points(self, populated) -> None:
        round_a = populated.get_rounds()[0]
        team = populated.get_teams()[0]
        populated.record_score(round_a.id, team.id, 4)
        populated.record_score(round_a.id, team.id, 6)
        assert populated.get_score(round_a.id, team.id).points == 6
        assert len(populated.snapshot().scores) == 1

    @pytest.mark.parametrize("points", [-1, 21])
    def test_points_outside_range_are_rejected(self, populated, points) -> None:
        round_a = populated.get_rounds()[0]
        with pytest.raises(ValueError):
            populated.record_score(round_a.id, populated.get_teams()[0].id, points)

    def test_unknown_ids_are_rejected(self, populated) -> None:
        with pytest.raises(KeyError, match="Team 99"):
            populated.record_score(populated.get_rounds()[0].id, 99, 1)
        with pytest.raises(KeyError, match="Round 99"):
            populated.record_score(99, populated.get_teams()[0].id, 1)

    def test_clear_score(self, populated) -> None:
        round_a = populated.get_rounds()[0]
        team = populated.get_teams()[0]
        populated.record_score(round_a.id, team.id, 4)
        populated.clear_score(round_a.id, team.id)
        assert populated.get_score(round_a.id, team.id) is None

    def test_clear_score_rejects_unknown_ids(self, populated) -> None:
        with pytest.raises(KeyError, match="Team 99"):
            populated.clear_score(populated.get_rounds()[0].id, 99)


class TestRankingViews:
    def test_example_scenario(self, populated) -> None:
        round_a, round_b, tiebreak = populated.get_rounds()
        team_x, team_y = populated.get_teams()
        populated.record_score(round_a.id, team_x.id, 10)
        populated.record_score(round_b.id, team_x.id, 5)
        populated.record_score(tiebreak.id, team_x.id, 9)
        populated.record_score(round_a.id, team_y.id, 20)
        populated.record_score(tiebreak.id, team_y.id, 6)
        populated.update_config(ex_aequo_enabled=True, ex_aequo_target_value=7)

        ranking = populated.get_ranking()
        assert [(r.name, r.rank) for r in ranking] == [("Team Y", 1), ("Team X", 2)]
        assert [r.total for r in ranking] == pytest.approx([10.0, 10.0])

    def test_reset_quiz_keeps_configuration(self, populated) -> None:
        populated.reset_quiz()
        assert populated.get_rounds() == []
        assert populated.get_teams() == []
        assert populated.get_config().scale_conversion_enabled

    def test_views_share_one_ranking(self, populated) -> None:
        populated.record_score(populated.get_rounds()[0].id, populated.get_teams()[1].id, 20)
        board = populated.get_board()
        chart = populated.get_chart()
        showcase = populated.get_showcase()
        assert [row.result for row in board.rows] == [bar.result for bar in chart.bars]
        assert [entry.result for entry in showcase] == [row.result for row in board.rows]

    def test_mutations_are_logged(self, manager, caplog) -> None:
        with caplog.at_level("INFO", logger="quizboard"):
            manager.add_team("Loggers")
        assert "Added team 1 (Loggers)" in caplog.text

    def test_round_update_and_score_clear_are_logged(self, populated, caplog) -> None:
        round_a = populated.get_rounds()[0]
        team = populated.get_teams()[0]
        populated.record_score(round_a.id, team.id, 4)
        with caplog.at_level("INFO", logger="quizboard"):
            populated.update_round(round_a.id, title="Opening")
            populated.clear_score(round_a.id, team.id)
        assert f"Updated round {round_a.id}" in caplog.text
        assert f"Cleared score of team {team.id} in round {round_a.id}" in caplog.text
