"""
Mastery and Readiness Configuration
Defines the per-topic mastery states, SAT sections and the score-gap
thresholds used to classify a student's readiness
"""

from enum import Enum
from typing import Dict

class MasteryState(str, Enum):
    """A student's learning status for one topic"""
    UNSEEN = "unseen"
    IN_PROGRESS = "in_progress"
    SHAKY = "shaky"
    SOLID = "solid"

class ReadinessState(str, Enum):
    """Severity of the gap between projected and target score"""
    ON_TRACK = "on_track"
    BORDERLINE = "borderline"
    AT_RISK = "at_risk"

class SatSection(str, Enum):
    MATH = "math"
    READING = "reading"
    WRITING = "writing"

class ErrorType(str, Enum):
    CONCEPTUAL = "conceptual"
    CARELESS = "careless"
    TIMING = "timing"

# Recommendation priority per mastery state (lower = more urgent).
# Solid topics are never recommended so they have no priority.
RECOMMENDATION_PRIORITY: Dict[MasteryState, int] = {
    MasteryState.SHAKY: 1,
    MasteryState.IN_PROGRESS: 2,
    MasteryState.UNSEEN: 3,
}

# Maximum number of focus recommendations returned
MAX_RECOMMENDATIONS = 3

# Maximum number of progress records shown as recent activity
RECENT_ACTIVITY_LIMIT = 5

# Score gap (target - projected) upper bounds, inclusive
ON_TRACK_MAX_GAP = 50
BORDERLINE_MAX_GAP = 150

# Days since last study used when a student has never studied
NEVER_STUDIED_DAYS = 999

# A streak needs recovery once more than this many full days have lapsed
STREAK_GRACE_DAYS = 1

MASTERY_DESCRIPTIONS = {
    MasteryState.UNSEEN: {
        "title": "Not Started",
        "description": "Topic has not been studied yet"
    },
    MasteryState.IN_PROGRESS: {
        "title": "In Progress",
        "description": "Pre-assessment taken, lesson underway"
    },
    MasteryState.SHAKY: {
        "title": "Shaky",
        "description": "Capstone attempted but missed, needs review"
    },
    MasteryState.SOLID: {
        "title": "Solid",
        "description": "Capstone solved, topic mastered"
    }
}
