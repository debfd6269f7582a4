"""File-backed course management: school years, semesters, general classes, courses, scores and accounts."""

__version__ = "0.1.0"