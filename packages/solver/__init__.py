from .core import Solver, DEFAULT_WORD_LENGTH, DEFAULT_MAX_RESULTS
from .index import DictionaryIndex
from .constraints import apply_feedback
from .frequency import WordScores, score_words
from .ranking import top_guesses

__all__ = [
    "Solver", "DEFAULT_WORD_LENGTH", "DEFAULT_MAX_RESULTS",
    "DictionaryIndex", "apply_feedback", "WordScores", "score_words", "top_guesses",
]
