from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime
from flashbook.database import Base
from flashbook.models.srs_columns import SRSColumnsMixin

class GrammarPoint(SRSColumnsMixin, Base):
    """Grammar pattern with explanation and an example"""
    __tablename__ = "grammar_points"
    kind = "grammar"
    
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    explanation = Column(Text, default="")
    example_sentence = Column(Text, default="")
    example_translation = Column(Text, default="")
    lesson = Column(String, default="", index=True)
    created = Column(DateTime, default=datetime.utcnow)
