"""Search, score and filter Japanese given names by stroke-count fortune telling."""

__version__ = "0.1.0"