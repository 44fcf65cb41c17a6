"""Product idea and PRD generator."""

__version__ = "0.1.0"
