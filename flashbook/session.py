from datetime import date
from enum import Enum
from typing import Callable, List, Optional, Sequence
import logging

from flashbook.errors import SessionFinishedError
from flashbook.schemas import Item, SRSFields
from flashbook.srs import Rating, SRSAlgorithm

logger = logging.getLogger(__name__)

class DeckMode(str, Enum):
    """Which items a review session draws from"""
    DUE = "due"
    ALL = "all"

def build_deck(
    grammar: Sequence[Item],
    vocab: Sequence[Item],
    sentences: Sequence[Item],
    deck: DeckMode = DeckMode.DUE,
    lesson: Optional[str] = None,
    reference_date: Optional[date] = None
) -> List[Item]:
    """
    Assemble the ordered list of cards for a review session.

    Cards are grammar points, then vocabulary, then sentences, each in the
    order given. The "due" deck keeps only items that have SRS state and are
    due on the reference date; "all" keeps every item. A lesson tag, when
    given, narrows either deck to that lesson.
    """
    deck = DeckMode(deck)
    cards: List[Item] = [*grammar, *vocab, *sentences]
    if deck is DeckMode.DUE:
        cards = [
            item for item in cards
            if item.srs is not None and SRSAlgorithm.is_due_today(item.srs.next_review_at, reference_date)
        ]
    if lesson:
        cards = [item for item in cards if item.lesson == lesson]
    return cards

def _matches(item: Item, query: str) -> bool:
    if item.kind == "grammar":
        fields = [item.title, item.explanation]
    elif item.kind == "vocab":
        fields = [item.word, item.meaning, item.reading]
    else:
        fields = [item.japanese_text, item.translation]
    return any(query in (value or "").lower() for value in fields)

def browse_items(
    grammar: Sequence[Item],
    vocab: Sequence[Item],
    sentences: Sequence[Item],
    kind: Optional[str] = None,
    lesson: Optional[str] = None,
    search: Optional[str] = None
) -> List[Item]:
    """
    Filter items for browsing, keeping kind order and source order.

    kind limits the result to one item kind. search is a case-insensitive
    substring match on the title and explanation of grammar points, the
    word, meaning and reading of vocabulary, and the text and translation
    of sentences.
    """
    groups = {"grammar": grammar, "vocab": vocab, "sentence": sentences}
    if kind:
        if kind not in groups:
            raise ValueError(f"Unknown item kind: {kind!r}")
        groups = {kind: groups[kind]}
    items: List[Item] = [item for group in groups.values() for item in group]
    if lesson:
        items = [item for item in items if item.lesson == lesson]
    query = (search or "").strip().lower()
    if query:
        items = [item for item in items if _matches(item, query)]
    return items

def collect_lessons(grammar: Sequence[Item], vocab: Sequence[Item], sentences: Sequence[Item]) -> List[str]:
    """Sorted lesson tags used across all items"""
    lessons = {item.lesson for item in [*grammar, *vocab, *sentences] if item.lesson}
    return sorted(lessons)

class ReviewSession:
    """
    One pass over a deck, rating each card exactly once.

    The deck is snapshotted on construction, so rating a card (which may
    push it out of the due set) never shifts the cards still to come.
    Every rating is handed to `persist(item, srs, rating)` before the
    session advances.
    """

    def __init__(
        self,
        cards: Sequence[Item],
        persist: Callable[[Item, SRSFields, Rating], None],
        reference_date: Optional[date] = None
    ):
        self.cards = list(cards)
        self.persist = persist
        self.reference_date = reference_date
        self.position = 0

    @property
    def total(self) -> int:
        return len(self.cards)

    @property
    def remaining(self) -> int:
        return self.total - self.position

    @property
    def finished(self) -> bool:
        return self.position >= self.total

    @property
    def current(self) -> Optional[Item]:
        if self.finished:
            return None
        return self.cards[self.position]

    def rate(self, rating) -> SRSFields:
        """Schedule the current card, persist it, and move to the next one"""
        item = self.current
        if item is None:
            raise SessionFinishedError("Review session has no cards left")
        rating = Rating.parse(rating)
        new_srs = SRSAlgorithm.next_srs(item.srs, rating, reference_date=self.reference_date)
        self.persist(item, new_srs, rating)
        logger.info("Rated %s %s as %s (card %d of %d)", item.kind, item.id, rating.value, self.position + 1, self.total)
        self.position += 1
        return new_srs

    def skip(self) -> None:
        """Move past the current card without scheduling it"""
        item = self.current
        if item is None:
            raise SessionFinishedError("Review session has no cards left")
        logger.warning("Skipped %s %s (card %d of %d)", item.kind, item.id, self.position + 1, self.total)
        self.position += 1
