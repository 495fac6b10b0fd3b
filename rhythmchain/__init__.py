"""Rhythm grouping and interval-ratio analysis for timed note onsets."""

__version__ = "0.1.0"
