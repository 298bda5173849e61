from sqlalchemy.orm import Session
from flashbook.crud.items import add_items_bulk, create_item, delete_item, get_item, list_items, update_item
from flashbook.models import GrammarPoint
from flashbook.schemas import GrammarCreate
from datetime import date
from typing import List, Optional

def create_grammar(db: Session, grammar: GrammarCreate, reference_date: Optional[date] = None) -> GrammarPoint:
    """Create a grammar point with default SRS state"""
    return create_item(db, "grammar", grammar.model_dump(), reference_date)

def add_grammar_bulk(db: Session, items: List[GrammarCreate], reference_date: Optional[date] = None) -> List[GrammarPoint]:
    """Create several grammar points at once"""
    return add_items_bulk(db, "grammar", [g.model_dump() for g in items], reference_date)

def get_grammar(db: Session, grammar_id: int) -> GrammarPoint:
    """Get grammar point by ID"""
    return get_item(db, "grammar", grammar_id)

def list_grammar(db: Session, lesson: Optional[str] = None) -> List[GrammarPoint]:
    """Get all grammar points"""
    return list_items(db, "grammar", lesson)

def update_grammar(db: Session, grammar_id: int, updates: dict) -> GrammarPoint:
    """Update grammar point fields"""
    return update_item(db, "grammar", grammar_id, updates)

def delete_grammar(db: Session, grammar_id: int) -> None:
    delete_item(db, "grammar", grammar_id)
