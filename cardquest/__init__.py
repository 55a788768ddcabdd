"""CardQuest: quiz questions for registered card holders."""

__version__ = "1.0.0"
