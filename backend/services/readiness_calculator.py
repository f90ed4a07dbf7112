"""
Readiness Calculator - Score-gap readiness and study streak classification
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from core.mastery_states import (
    ReadinessState,
    ON_TRACK_MAX_GAP,
    BORDERLINE_MAX_GAP,
    NEVER_STUDIED_DAYS,
    STREAK_GRACE_DAYS
)


@dataclass
class StreakInfo:
    current: int
    needs_recovery: bool


def assess_readiness(current_projected_score: int, target_score: int) -> Tuple[ReadinessState, int]:
    """Classify how far a student is from their target score.

    The gap is compared as-is, so students who already beat their target
    (negative gap) are on track.
    """
    score_gap = target_score - current_projected_score

    if score_gap <= ON_TRACK_MAX_GAP:
        return ReadinessState.ON_TRACK, score_gap
    if score_gap <= BORDERLINE_MAX_GAP:
        return ReadinessState.BORDERLINE, score_gap
    return ReadinessState.AT_RISK, score_gap


def days_since(moment: Optional[datetime], now: Optional[datetime] = None) -> int:
    """Whole elapsed days since `moment`, ignoring calendar boundaries"""
    if moment is None:
        return NEVER_STUDIED_DAYS

    now = now or datetime.now(timezone.utc)
    # SQLite hands back naive datetimes; everything is stored in UTC
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    return (now - moment) // timedelta(days=1)


def compute_streak(
    last_study_date: Optional[datetime],
    study_streak: int,
    now: Optional[datetime] = None
) -> StreakInfo:
    """Flag a lapsed streak for recovery without touching the stored counter"""
    lapsed_days = days_since(last_study_date, now)
    needs_recovery = lapsed_days > STREAK_GRACE_DAYS and study_streak > 0
    return StreakInfo(current=study_streak, needs_recovery=needs_recovery)
