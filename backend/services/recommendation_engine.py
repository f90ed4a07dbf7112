"""
Recommendation Engine - Ranks the topics a student should focus on next
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence

from core.mastery_states import MasteryState, RECOMMENDATION_PRIORITY, MAX_RECOMMENDATIONS


@dataclass
class RecommendedFocus:
    topic: Any
    reason: str
    score_impact: int
    priority: int


def classify_mastery(progress: Optional[Any]) -> MasteryState:
    """Mastery state of a topic; a missing progress record counts as unseen"""
    if progress is None or progress.mastery_state is None:
        return MasteryState.UNSEEN
    return MasteryState(progress.mastery_state)


def build_reason(state: MasteryState, score_impact: int) -> str:
    if state == MasteryState.SHAKY:
        return "This topic needs review to solidify your understanding. High test frequency means it's worth your time."
    if state == MasteryState.IN_PROGRESS:
        return "You're making progress here. A bit more practice will move this to solid mastery."
    return f"New topic with high score impact ({score_impact} points). Starting here could boost your overall score."


def recommend_focus(
    topics: Sequence[Any],
    progress_by_topic: Mapping[Any, Any],
    limit: int = MAX_RECOMMENDATIONS
) -> List[RecommendedFocus]:
    """
    Rank non-solid topics by urgency.

    Shaky topics come first, then in-progress, then unseen. Within the same
    priority, higher score impact wins; remaining ties keep catalog order.
    Returns at most `limit` entries and never pads.
    """
    candidates = []
    for topic in topics:
        state = classify_mastery(progress_by_topic.get(topic.id))
        if state == MasteryState.SOLID:
            continue

        candidates.append(RecommendedFocus(
            topic=topic,
            reason=build_reason(state, topic.score_impact),
            score_impact=topic.score_impact,
            priority=RECOMMENDATION_PRIORITY[state]
        ))

    # sorted() is stable, so equal keys keep catalog order
    candidates = sorted(candidates, key=lambda rec: (rec.priority, -rec.score_impact))
    return candidates[:limit]


def progress_index(progress_records: Sequence[Any]) -> Dict[Any, Any]:
    """Map topic id -> progress record"""
    return {record.topic_id: record for record in progress_records}
