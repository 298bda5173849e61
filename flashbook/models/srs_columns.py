from sqlalchemy import Column, Float, Integer, String
from flashbook.schemas import SRSFields

class SRSColumnsMixin:
    """SRS state stored as three columns on each item table"""
    next_review_at = Column(String(10), index=True)  # YYYY-MM-DD
    interval = Column(Integer)  # days until next review
    ease_factor = Column(Float)  # carried, never recalculated
    
    @property
    def srs(self):
        if self.next_review_at is None:
            return None
        return SRSFields(
            next_review_at=self.next_review_at,
            interval=self.interval or 0,
            ease_factor=self.ease_factor if self.ease_factor is not None else 2.5
        )
    
    @srs.setter
    def srs(self, value):
        if value is None:
            self.next_review_at = None
            self.interval = None
            self.ease_factor = None
            return
        self.next_review_at = value.next_review_at
        self.interval = value.interval
        self.ease_factor = value.ease_factor
