from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Annotated, List, Literal, Optional, Union
from datetime import date, datetime
import re

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

class SRSFields(BaseModel):
    """
    Spaced-repetition state embedded in every learnable item.
    
    next_review_at is an ISO YYYY-MM-DD string so that due checks can
    compare dates as plain strings. ease_factor is carried but never
    recalculated by the scheduler.
    """
    next_review_at: str = Field(alias="nextReviewAt")
    interval: int = Field(ge=0)
    ease_factor: float = Field(default=2.5, gt=0, alias="easeFactor")
    
    model_config = ConfigDict(frozen=True, populate_by_name=True, from_attributes=True)
    
    @field_validator("next_review_at", mode="before")
    @classmethod
    def _check_iso_date(cls, value):
        if isinstance(value, datetime):
            value = value.date()
        if isinstance(value, date):
            return value.isoformat()
        if not isinstance(value, str) or not ISO_DATE_RE.match(value):
            raise ValueError(f"next_review_at must be a YYYY-MM-DD date, got {value!r}")
        date.fromisoformat(value)
        return value
    
    def to_wire(self) -> dict:
        """Serialize using the camelCase keys items are stored with"""
        return self.model_dump(by_alias=True)

class VerbConjugation(BaseModel):
    """Conjugated forms stored with a vocabulary item (all optional)"""
    present: Optional[str] = None
    negative: Optional[str] = None
    past: Optional[str] = None
    past_negative: Optional[str] = None
    te_form: Optional[str] = None
    tai_form: Optional[str] = None
    
    def filled(self) -> List[tuple]:
        """(label, value) pairs for the forms that are not blank"""
        labels = {
            "present": "Present",
            "negative": "Negative",
            "past": "Past",
            "past_negative": "Past Negative",
            "te_form": "Te-form",
            "tai_form": "Tai-form",
        }
        pairs = []
        for key, label in labels.items():
            value = getattr(self, key)
            if value and value.strip():
                pairs.append((label, value.strip()))
        return pairs

# Content schemas (what a user types in)

class GrammarCreate(BaseModel):
    """Schema for creating a grammar point"""
    title: str
    explanation: str = ""
    example_sentence: str = ""
    example_translation: str = ""
    lesson: str = ""

class VocabularyCreate(BaseModel):
    """Schema for creating a vocabulary entry"""
    word: str
    reading: str = ""
    meaning: str = ""
    example_sentence: str = ""
    lesson: str = ""
    conjugation_summary: Optional[str] = None
    conjugation: Optional[VerbConjugation] = None

class SentenceCreate(BaseModel):
    """Schema for creating an example sentence"""
    japanese_text: str
    translation: str = ""
    linked_grammar: Optional[str] = None
    lesson: str = ""

# Stored items: one variant per kind, discriminated by `kind`

class GrammarItem(GrammarCreate):
    kind: Literal["grammar"] = "grammar"
    id: int
    created: datetime
    srs: Optional[SRSFields] = None
    
    model_config = ConfigDict(from_attributes=True)
    
    @property
    def front(self) -> str:
        return self.title

class VocabularyItem(VocabularyCreate):
    kind: Literal["vocab"] = "vocab"
    id: int
    created: datetime
    srs: Optional[SRSFields] = None
    
    model_config = ConfigDict(from_attributes=True)
    
    @property
    def front(self) -> str:
        return self.word

class SentenceItem(SentenceCreate):
    kind: Literal["sentence"] = "sentence"
    id: int
    created: datetime
    srs: Optional[SRSFields] = None
    
    model_config = ConfigDict(from_attributes=True)
    
    @property
    def front(self) -> str:
        return self.japanese_text

Item = Annotated[Union[GrammarItem, VocabularyItem, SentenceItem], Field(discriminator="kind")]

ItemKind = Literal["grammar", "vocab", "sentence"]
ITEM_KINDS = ("grammar", "vocab", "sentence")
