from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from flashbook.database import Base

class ReviewLog(Base):
    """One flashcard rating and the schedule it produced"""
    __tablename__ = "review_log"
    
    id = Column(Integer, primary_key=True, index=True)
    item_kind = Column(String, nullable=False)  # "grammar", "vocab" or "sentence"
    item_id = Column(Integer, nullable=False, index=True)
    rating = Column(String, nullable=False)  # "again", "good" or "easy"
    reviewed_on = Column(String(10), nullable=False)  # YYYY-MM-DD
    interval = Column(Integer, nullable=False)
    next_review_at = Column(String(10), nullable=False)
    
    created_at = Column(DateTime, default=datetime.utcnow)
