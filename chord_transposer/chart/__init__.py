"""Chord chart tokenization.

This package splits pasted chord charts into spans and tokens, decides
which tokens look like chords and locates them by line and column.
"""

from chord_transposer.chart.chord_detector import (
    classify_token,
    classify_tokens,
    detect_hotspots,
    looks_like_chord,
    normalize_chart_text,
    parse_chord,
    tokenize_chart_line,
    unique_chords,
)
from chord_transposer.chart.models import Hotspot, Token
from chord_transposer.chart.tokenizer import (
    has_punctuation,
    split_preserving_whitespace,
    split_punctuation,
    split_token,
    tokenize_line,
)

__all__ = [
    "Hotspot",
    "Token",
    "classify_token",
    "classify_tokens",
    "detect_hotspots",
    "has_punctuation",
    "looks_like_chord",
    "normalize_chart_text",
    "parse_chord",
    "split_preserving_whitespace",
    "split_punctuation",
    "split_token",
    "tokenize_chart_line",
    "tokenize_line",
    "unique_chords",
]
