from datetime import date, datetime, timedelta
from enum import Enum
from typing import Optional, Union
import logging

from flashbook.errors import InvalidRatingError
from flashbook.schemas import SRSFields

logger = logging.getLogger(__name__)

# Simple stepped schedule: again -> 0d, good -> +1 interval, easy -> +2
DEFAULT_EASE_FACTOR = 2.5
MIN_INTERVAL = 0
GOOD_BONUS = 1
EASY_BONUS = 2

class Rating(str, Enum):
    """Learner's self-assessment of recall for one review"""
    AGAIN = "again"
    GOOD = "good"
    EASY = "easy"

    @classmethod
    def parse(cls, value: Union["Rating", str]) -> "Rating":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidRatingError(value) from None

class SRSAlgorithm:
    """
    Stepped spaced-repetition schedule for flashcard reviews.

    Each review moves the interval by a fixed step (no multiplication by
    ease): "again" resets to zero, "good" adds one day, "easy" adds two.
    The ease factor is stored and carried forward untouched.
    """

    @staticmethod
    def today_iso(reference_date: Optional[date] = None) -> str:
        """
        ISO date (YYYY-MM-DD) for the reference date, or for today.

        A datetime is truncated to its calendar date; time of day and
        timezone are ignored.
        """
        if reference_date is None:
            reference_date = date.today()
        elif isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        return reference_date.isoformat()

    @staticmethod
    def add_days(iso: str, days: int) -> str:
        """Add calendar days to an ISO date string"""
        return (date.fromisoformat(iso) + timedelta(days=days)).isoformat()

    @staticmethod
    def default_srs(reference_date: Optional[date] = None) -> SRSFields:
        """Initial state for a new item: due today, interval 0, ease 2.5"""
        return SRSFields(
            next_review_at=SRSAlgorithm.today_iso(reference_date),
            interval=MIN_INTERVAL,
            ease_factor=DEFAULT_EASE_FACTOR
        )

    @staticmethod
    def next_srs(
        current: Optional[SRSFields],
        rating: Union[Rating, str],
        reference_date: Optional[date] = None  # Optional: use custom date instead of today
    ) -> SRSFields:
        """
        Calculate the scheduling state after a review.

        Args:
            current: Item's current state; None means never reviewed
            rating: again, good or easy
            reference_date: Optional reference date (defaults to today)

        Returns:
            A complete SRSFields with the new interval and next review date
        """
        rating = Rating.parse(rating)

        # Today is read once so the reset value and the offset base agree
        today = SRSAlgorithm.today_iso(reference_date)
        prev = current if current is not None else SRSFields(
            next_review_at=today,
            interval=MIN_INTERVAL,
            ease_factor=DEFAULT_EASE_FACTOR
        )

        if rating is Rating.AGAIN:
            next_interval = MIN_INTERVAL
            next_date = today
        elif rating is Rating.GOOD:
            next_interval = max(1, prev.interval + GOOD_BONUS)
            next_date = SRSAlgorithm.add_days(today, next_interval)
        else:
            next_interval = max(1, prev.interval + EASY_BONUS)
            next_date = SRSAlgorithm.add_days(today, next_interval)

        logger.debug(
            "srs %s: interval %d -> %d, next review %s",
            rating.value, prev.interval, next_interval, next_date
        )
        return SRSFields(
            next_review_at=next_date,
            interval=next_interval,
            ease_factor=prev.ease_factor
        )

    @staticmethod
    def is_due_today(next_review_at: str, reference_date: Optional[date] = None) -> bool:
        """Check if an item scheduled for next_review_at is due (today or earlier)"""
        return next_review_at <= SRSAlgorithm.today_iso(reference_date)

    @staticmethod
    def days_overdue(next_review_at: str, reference_date: Optional[date] = None) -> int:
        """Calculate how many days overdue a review is"""
        today = date.fromisoformat(SRSAlgorithm.today_iso(reference_date))
        scheduled = date.fromisoformat(next_review_at)
        if today < scheduled:
            return 0
        return (today - scheduled).days


next_srs = SRSAlgorithm.next_srs
is_due_today = SRSAlgorithm.is_due_today
default_srs = SRSAlgorithm.default_srs
