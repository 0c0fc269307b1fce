"""Quality-score series engine for the ads dashboard."""

__version__ = "1.0.0"
