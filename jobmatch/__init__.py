"""Location-aware job search: fetch listings, score them against a home location, rank."""

__version__ = "0.1.0"
