from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime
from flashbook.database import Base
from flashbook.models.srs_columns import SRSColumnsMixin

class Sentence(SRSColumnsMixin, Base):
    """Example sentence with translation"""
    __tablename__ = "sentences"
    kind = "sentence"
    
    id = Column(Integer, primary_key=True, index=True)
    japanese_text = Column(Text, nullable=False)
    translation = Column(Text, default="")
    linked_grammar = Column(String)  # title or id of a grammar point
    lesson = Column(String, default="", index=True)
    created = Column(DateTime, default=datetime.utcnow)
