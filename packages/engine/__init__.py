from .scoring import score, is_solved, ABSENT, PRESENT, CORRECT
from .validation import is_valid_word, validate_feedback
from .errors import SolverError, DictionaryUnavailable, MalformedFeedback

__all__ = [
    "score", "is_solved", "ABSENT", "PRESENT", "CORRECT",
    "is_valid_word", "validate_feedback",
    "SolverError", "DictionaryUnavailable", "MalformedFeedback",
]
