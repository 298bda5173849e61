"""flashbook - personal language-learning tracker with spaced repetition."""

__version__ = "0.1.0"
