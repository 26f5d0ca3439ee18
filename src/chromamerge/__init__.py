"""ChromaMerge – perceptual color deduplication."""

__version__ = "0.1.0"
