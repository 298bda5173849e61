from sqlalchemy.orm import Session
from flashbook.crud.items import get_item, list_items
from flashbook.models import ReviewLog
from flashbook.schemas import GrammarItem, Item, SentenceItem, SRSFields, VocabularyItem
from flashbook.srs import Rating, SRSAlgorithm
from datetime import date
from typing import Callable, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

SCHEMAS_BY_KIND = {
    "grammar": GrammarItem,
    "vocab": VocabularyItem,
    "sentence": SentenceItem,
}

def get_items(db: Session, lesson: Optional[str] = None) -> Tuple[List[Item], List[Item], List[Item]]:
    """Load (grammar, vocab, sentences) as schema objects, in insertion order"""
    return tuple(
        [schema.model_validate(row) for row in list_items(db, kind, lesson)]
        for kind, schema in SCHEMAS_BY_KIND.items()
    )

def save_srs(
    db: Session,
    kind: str,
    item_id: int,
    srs: SRSFields,
    rating: Optional[Rating] = None,
    reference_date: Optional[date] = None
) -> SRSFields:
    """
    Replace an item's SRS state and log the review.
    
    The whole SRS slice is overwritten, so concurrent writers resolve as
    last write wins.
    """
    try:
        row = get_item(db, kind, item_id)
        row.srs = srs
        if rating is not None:
            db.add(ReviewLog(
                item_kind=kind,
                item_id=item_id,
                rating=Rating.parse(rating).value,
                reviewed_on=SRSAlgorithm.today_iso(reference_date),
                interval=srs.interval,
                next_review_at=srs.next_review_at
            ))
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Saved %s item %d: next review %s (interval %d)", kind, item_id, srs.next_review_at, srs.interval)
    return srs

def apply_rating(
    db: Session,
    kind: str,
    item_id: int,
    rating,
    reference_date: Optional[date] = None
) -> SRSFields:
    """Run the scheduler for one rating and persist the result"""
    rating = Rating.parse(rating)
    row = get_item(db, kind, item_id)
    new_srs = SRSAlgorithm.next_srs(row.srs, rating, reference_date=reference_date)
    return save_srs(db, kind, item_id, new_srs, rating, reference_date)

def persist_srs(db: Session, reference_date: Optional[date] = None) -> Callable[[Item, SRSFields, Rating], None]:
    """Persistence callback for a ReviewSession bound to a database session"""
    def persist(item: Item, srs: SRSFields, rating: Rating) -> None:
        save_srs(db, item.kind, item.id, srs, rating, reference_date)
    return persist

def get_review_log(db: Session, limit: int = 50) -> List[ReviewLog]:
    """Get most recent reviews"""
    return db.query(ReviewLog).order_by(ReviewLog.id.desc()).limit(limit).all()
