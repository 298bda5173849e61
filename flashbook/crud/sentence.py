from sqlalchemy.orm import Session
from flashbook.crud.items import add_items_bulk, create_item, delete_item, get_item, list_items, update_item
from flashbook.models import Sentence
from flashbook.schemas import SentenceCreate
from datetime import date
from typing import List, Optional

def create_sentence(db: Session, sentence: SentenceCreate, reference_date: Optional[date] = None) -> Sentence:
    """Create an example sentence with default SRS state"""
    return create_item(db, "sentence", sentence.model_dump(), reference_date)

def add_sentences_bulk(db: Session, items: List[SentenceCreate], reference_date: Optional[date] = None) -> List[Sentence]:
    """Create several sentences at once"""
    return add_items_bulk(db, "sentence", [s.model_dump() for s in items], reference_date)

def get_sentence(db: Session, sentence_id: int) -> Sentence:
    return get_item(db, "sentence", sentence_id)

def list_sentences(db: Session, lesson: Optional[str] = None) -> List[Sentence]:
    """Get all sentences"""
    return list_items(db, "sentence", lesson)

def update_sentence(db: Session, sentence_id: int, updates: dict) -> Sentence:
    """Update sentence fields"""
    return update_item(db, "sentence", sentence_id, updates)

def delete_sentence(db: Session, sentence_id: int) -> None:
    delete_item(db, "sentence", sentence_id)
