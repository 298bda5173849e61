class FlashbookError(Exception):
    """Base class for flashbook errors"""


class InvalidRatingError(FlashbookError, ValueError):
    """Raised when a rating is not one of again/good/easy"""

    def __init__(self, rating):
        self.rating = rating
        super().__init__(f"Invalid rating: {rating!r} (expected again, good or easy)")


class ItemNotFoundError(FlashbookError, LookupError):
    """Raised when an item id does not exist for the given kind"""

    def __init__(self, kind: str, item_id: int):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"No {kind} item with id {item_id}")


class SessionFinishedError(FlashbookError):
    """Raised when rating a card after the review session has ended"""
