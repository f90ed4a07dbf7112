from types import SimpleNamespace

import pytest

from core.mastery_states import MasteryState
from services.recommendation_engine import classify_mastery, recommend_focus, progress_index


def make_topic(topic_id, score_impact):
    return SimpleNamespace(id=topic_id, score_impact=score_impact)


def make_progress(topic_id, state):
    return SimpleNamespace(topic_id=topic_id, mastery_state=state)


class TestClassifyMastery:

    def test_missing_record_is_unseen(self):
        assert classify_mastery(None) == MasteryState.UNSEEN

    @pytest.mark.parametrize("state", list(MasteryState))
    def test_stored_state_passes_through(self, state):
        assert classify_mastery(make_progress("t", state)) == state

    def test_plain_string_state(self):
        assert classify_mastery(make_progress("t", "shaky")) == MasteryState.SHAKY


class TestRecommendFocus:

    def test_shaky_unseen_solid_scenario(self):
        topics = [make_topic("T1", 25), make_topic("T2", 30), make_topic("T3", 10)]
        progress = progress_index([
            make_progress("T1", MasteryState.SHAKY),
            make_progress("T3", MasteryState.SOLID),
        ])

        recommendations = recommend_focus(topics, progress)

        assert [r.topic.id for r in recommendations] == ["T1", "T2"]
        assert [r.priority for r in recommendations] == [1, 3]
        assert recommendations[0].score_impact == 25
        assert recommendations[1].score_impact == 30

    def test_solid_topics_never_recommended(self):
        topics = [make_topic(f"T{i}", 100 - i) for i in range(6)]
        progress = progress_index([make_progress("T0", MasteryState.SOLID), make_progress("T1", MasteryState.SOLID)])

        recommendations = recommend_focus(topics, progress)

        assert all(r.topic.id not in {"T0", "T1"} for r in recommendations)

    def test_all_solid_returns_empty(self):
        topics = [make_topic("A", 10), make_topic("B", 20)]
        progress = progress_index([make_progress("A", MasteryState.SOLID), make_progress("B", MasteryState.SOLID)])

        assert recommend_focus(topics, progress) == []

    def test_empty_catalog(self):
        assert recommend_focus([], {}) == []

    def test_truncates_to_three(self):
        topics = [make_topic(f"T{i}", 10 + i) for i in range(7)]

        recommendations = recommend_focus(topics, {})

        assert len(recommendations) == 3
        assert [r.topic.id for r in recommendations] == ["T6", "T5", "T4"]

    def test_never_pads(self):
        topics = [make_topic("A", 10), make_topic("B", 20)]
        assert len(recommend_focus(topics, {})) == 2

    def test_priority_then_score_impact(self):
        topics = [
            make_topic("unseen_big", 40),
            make_topic("progress_small", 5),
            make_topic("shaky_small", 5),
            make_topic("progress_big", 30),
            make_topic("shaky_big", 20),
        ]
        progress = progress_index([
            make_progress("progress_small", MasteryState.IN_PROGRESS),
            make_progress("shaky_small", MasteryState.SHAKY),
            make_progress("progress_big", MasteryState.IN_PROGRESS),
            make_progress("shaky_big", MasteryState.SHAKY),
        ])

        recommendations = recommend_focus(topics, progress, limit=5)

        assert [r.topic.id for r in recommendations] == [
            "shaky_big", "shaky_small", "progress_big", "progress_small", "unseen_big"
        ]
        for a, b in zip(recommendations, recommendations[1:]):
            assert a.priority < b.priority or (a.priority == b.priority and a.score_impact >= b.score_impact)

    def test_full_ties_keep_catalog_order(self):
        topics = [make_topic("first", 15), make_topic("second", 15), make_topic("third", 15)]

        recommendations = recommend_focus(topics, {})

        assert [r.topic.id for r in recommendations] == ["first", "second", "third"]

    def test_reason_matches_state(self):
        topics = [make_topic("S", 10), make_topic("P", 10), make_topic("U", 12)]
        progress = progress_index([
            make_progress("S", MasteryState.SHAKY),
            make_progress("P", MasteryState.IN_PROGRESS),
        ])

        shaky, in_progress, unseen = recommend_focus(topics, progress)

        assert "review" in shaky.reason
        assert "making progress" in in_progress.reason
        assert "12 points" in unseen.reason
