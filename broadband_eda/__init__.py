"""Block-level broadband deployment EDA (FCC Form 477 + census blocks)."""

__version__ = "0.1.0"
