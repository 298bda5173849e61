from sqlalchemy.orm import Session
from flashbook.crud.items import add_items_bulk, create_item, delete_item, get_item, list_items, update_item
from flashbook.models import VocabularyEntry
from flashbook.schemas import VocabularyCreate
from datetime import date
from typing import List, Optional

def create_vocab(db: Session, vocab: VocabularyCreate, reference_date: Optional[date] = None) -> VocabularyEntry:
    """Create a vocabulary entry with default SRS state"""
    return create_item(db, "vocab", vocab.model_dump(), reference_date)

def add_vocab_bulk(db: Session, items: List[VocabularyCreate], reference_date: Optional[date] = None) -> List[VocabularyEntry]:
    """Create several vocabulary entries at once"""
    return add_items_bulk(db, "vocab", [v.model_dump() for v in items], reference_date)

def get_vocab(db: Session, vocab_id: int) -> VocabularyEntry:
    """Get vocabulary entry by ID"""
    return get_item(db, "vocab", vocab_id)

def list_vocab(db: Session, lesson: Optional[str] = None) -> List[VocabularyEntry]:
    """Get all vocabulary entries"""
    return list_items(db, "vocab", lesson)

def update_vocab(db: Session, vocab_id: int, updates: dict) -> VocabularyEntry:
    """Update vocabulary entry fields"""
    return update_item(db, "vocab", vocab_id, updates)

def delete_vocab(db: Session, vocab_id: int) -> None:
    delete_item(db, "vocab", vocab_id)
