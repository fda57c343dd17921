"""Step-by-step sorting algorithms with statistics, cursor tracking and tone synthesis."""

__version__ = "1.0.0"