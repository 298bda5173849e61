from flashbook.models.grammar import GrammarPoint
from flashbook.models.vocabulary import VocabularyEntry
from flashbook.models.sentence import Sentence
from flashbook.models.review_log import ReviewLog

MODELS_BY_KIND = {
    "grammar": GrammarPoint,
    "vocab": VocabularyEntry,
    "sentence": Sentence,
}

__all__ = [
    "GrammarPoint",
    "VocabularyEntry",
    "Sentence",
    "ReviewLog",
    "MODELS_BY_KIND"
]
