from .feedback import Attempt, FeedbackKind, LetterFeedback
from .constraints import ConstraintSet, filter_candidates
from .frequency import FrequencyTable
from .scoring import score
from .validation import parse_feedback
from .errors import WordlerError, InvalidFeedbackError, StrategyLockedError

__all__ = [
    "Attempt", "FeedbackKind", "LetterFeedback", "ConstraintSet", "filter_candidates",
    "FrequencyTable", "score", "parse_feedback",
    "WordlerError", "InvalidFeedbackError", "StrategyLockedError",
]
