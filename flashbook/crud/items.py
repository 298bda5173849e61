from sqlalchemy.orm import Session
from flashbook.errors import ItemNotFoundError
from flashbook.models import MODELS_BY_KIND
from flashbook.srs import SRSAlgorithm
from datetime import date
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

def model_for(kind: str):
    """ORM model class for an item kind"""
    try:
        return MODELS_BY_KIND[kind]
    except KeyError:
        raise ValueError(f"Unknown item kind: {kind!r}") from None

def create_item(db: Session, kind: str, data: dict, reference_date: Optional[date] = None):
    """Create an item of any kind, due immediately"""
    row = model_for(kind)(**data)
    row.srs = SRSAlgorithm.default_srs(reference_date)
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("Created %s item %d", kind, row.id)
    return row

def add_items_bulk(db: Session, kind: str, rows: List[dict], reference_date: Optional[date] = None) -> list:
    """Create many items of one kind in a single commit"""
    model = model_for(kind)
    created = []
    for data in rows:
        row = model(**data)
        row.srs = SRSAlgorithm.default_srs(reference_date)
        db.add(row)
        created.append(row)
    db.commit()
    for row in created:
        db.refresh(row)
    logger.info("Created %d %s items", len(created), kind)
    return created

def get_item(db: Session, kind: str, item_id: int):
    """Get item by kind and ID, raising ItemNotFoundError if missing"""
    model = model_for(kind)
    row = db.query(model).filter(model.id == item_id).first()
    if row is None:
        raise ItemNotFoundError(kind, item_id)
    return row

def list_items(db: Session, kind: str, lesson: Optional[str] = None) -> list:
    """Get all items of one kind in insertion order, optionally for one lesson"""
    model = model_for(kind)
    query = db.query(model)
    if lesson:
        query = query.filter(model.lesson == lesson)
    return query.order_by(model.id).all()

READ_ONLY_COLUMNS = {"id", "created"}

def editable_fields(kind: str) -> set:
    """Names update_item accepts for a kind: its columns plus `srs`"""
    columns = set(model_for(kind).__table__.columns.keys())
    return (columns - READ_ONLY_COLUMNS) | {"srs"}

def update_item(db: Session, kind: str, item_id: int, updates: dict):
    """Apply a partial update to an item"""
    unknown = set(updates) - editable_fields(kind)
    if unknown:
        raise ValueError(f"Cannot update {kind} field(s): {', '.join(sorted(unknown))}")
    row = get_item(db, kind, item_id)
    for key, value in updates.items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    return row

def delete_item(db: Session, kind: str, item_id: int) -> None:
    """Delete an item (its SRS state goes with it)"""
    row = get_item(db, kind, item_id)
    db.delete(row)
    db.commit()
    logger.info("Deleted %s item %d", kind, item_id)
