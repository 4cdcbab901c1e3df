"""Chord chart transposer.

This library rewrites chord charts into another key, suggests capo
positions and looks up guitar voicings for chord symbols.

Examples
--------
>>> from chord_transposer import transpose_chord_text, suggest_capos_for_target_key

>>> # Move a progression up a whole step
>>> transpose_chord_text("C G Am F", 2, True)
'D A Bm G'

>>> # Play in D with C shapes
>>> suggest_capos_for_target_key("D")[0].capo_fret
0

>>> from chord_transposer import find_voicings_for
>>> [s.family for s in find_voicings_for("F#m")]
['barre-e', 'barre-a', 'barre-e']
"""

from chord_transposer.capo import (
    capo_shapes_text,
    score_capo,
    shapes_key_for,
    suggest_capos_for_target_key,
)
from chord_transposer.chart import (
    detect_hotspots,
    looks_like_chord,
    split_preserving_whitespace,
    unique_chords,
)
from chord_transposer.models import Barre, CapoSuggestion, Chord, ChordSymbol, Shape
from chord_transposer.pitch_class import (
    ALL_KEYS,
    normalize_spelling,
    note_to_pc,
    prefer_sharps_for_key,
    semitone_steps_between,
    spell,
)
from chord_transposer.share import ShareState, decode_share_state, encode_share_state
from chord_transposer.transpose import (
    parse_chord_symbol,
    transpose_chart,
    transpose_chord_symbol,
    transpose_chord_text,
    transpose_note,
)
from chord_transposer.view import ChartView, build_chart_view
from chord_transposer.voicings import OPEN_SHAPES, coarse_quality, find_voicings_for

__all__ = [
    "ALL_KEYS",
    "OPEN_SHAPES",
    "Barre",
    "CapoSuggestion",
    "ChartView",
    "Chord",
    "ChordSymbol",
    "Shape",
    "ShareState",
    "build_chart_view",
    "capo_shapes_text",
    "coarse_quality",
    "decode_share_state",
    "detect_hotspots",
    "encode_share_state",
    "find_voicings_for",
    "looks_like_chord",
    "normalize_spelling",
    "note_to_pc",
    "parse_chord_symbol",
    "prefer_sharps_for_key",
    "score_capo",
    "semitone_steps_between",
    "shapes_key_for",
    "spell",
    "split_preserving_whitespace",
    "suggest_capos_for_target_key",
    "transpose_chart",
    "transpose_chord_symbol",
    "transpose_chord_text",
    "transpose_note",
    "unique_chords",
]
