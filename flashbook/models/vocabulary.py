from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from datetime import datetime
from flashbook.database import Base
from flashbook.models.srs_columns import SRSColumnsMixin

class VocabularyEntry(SRSColumnsMixin, Base):
    """Word with reading, meaning and optional verb conjugations"""
    __tablename__ = "vocabulary"
    kind = "vocab"
    
    id = Column(Integer, primary_key=True, index=True)
    word = Column(String, nullable=False)
    reading = Column(String, default="")
    meaning = Column(Text, default="")
    example_sentence = Column(Text, default="")
    lesson = Column(String, default="", index=True)
    conjugation_summary = Column(String)
    conjugation = Column(JSON)  # {"present": ..., "te_form": ..., ...}
    created = Column(DateTime, default=datetime.utcnow)
