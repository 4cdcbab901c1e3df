"""Capo suggestions for guitarists.

A capo at fret N raises every string by N semitones, so a chart that
sounds in the target key can be fingered with the shapes of the key N
semitones lower. Positions are ranked by how friendly those shapes are
and how comfortable the fret is.
"""

from __future__ import annotations

from chord_transposer.models import CapoSuggestion
from chord_transposer.pitch_class import prefer_sharps_for_key
from chord_transposer.transpose import transpose_chord_text, transpose_note

# Keys with the friendliest open-chord shapes
OPEN_SHAPE_KEYS: frozenset[str] = frozenset({"C", "G", "D", "A", "E"})
OPEN_SHAPE_BONUS = 100.0

# Tie-breaking preference among open-shape keys, most preferred first
BIAS_ORDER: tuple[str, ...] = ("G", "C", "D", "A", "E")
BIAS_STEP = 0.5

MAX_CAPO_FRET = 11
COMFORT_FRET_LIMIT = 5
DEFAULT_SUGGESTION_LIMIT = 5


def shapes_key_for(target_key: str, capo_fret: int) -> str:
    """Key whose shapes sound as ``target_key`` with a capo at ``capo_fret``.

    Parameters
    ----------
    target_key : str
        The key the music should sound in.
    capo_fret : int
        Fret the capo sits on (0 = no capo).

    Returns
    -------
    str
        The shapes key, spelled the way ``target_key`` prefers.

    Examples
    --------
    >>> shapes_key_for("D", 2)
    'C'
    >>> shapes_key_for("Eb", 1)
    'D'
    """
    return transpose_note(target_key, -capo_fret, prefer_sharps_for_key(target_key))


def comfort_bonus(capo_fret: int) -> float:
    """Positional comfort: 20 at the nut, 10 at fret 5, fading out by fret 9.

    Examples
    --------
    >>> [comfort_bonus(f) for f in (0, 5, 6, 8, 9)]
    [20.0, 10.0, 7.0, 1.0, 0.0]
    """
    if capo_fret <= COMFORT_FRET_LIMIT:
        return float(20 - capo_fret * 2)
    return float(max(0, 10 - (capo_fret - COMFORT_FRET_LIMIT) * 3))


def key_bias(shapes_key: str) -> float:
    """Small preference among open-shape keys (G > C > D > A > E).

    Keys outside that order get no bias at all rather than the largest
    one, so a non-open key scores only its comfort bonus and ranks
    2.5 points lower than it would under a clamped lookup.

    Examples
    --------
    >>> key_bias("G"), key_bias("E"), key_bias("F#")
    (2.5, 0.5, 0.0)
    """
    if shapes_key not in BIAS_ORDER:
        return 0.0
    return (len(BIAS_ORDER) - BIAS_ORDER.index(shapes_key)) * BIAS_STEP


def score_capo(shapes_key: str, capo_fret: int) -> float:
    """Score a capo position; higher is better.

    Examples
    --------
    >>> score_capo("C", 0)
    122.0
    >>> score_capo("F", 1)
    18.0
    """
    score = OPEN_SHAPE_BONUS if shapes_key in OPEN_SHAPE_KEYS else 0.0
    return score + comfort_bonus(capo_fret) + key_bias(shapes_key)


def reason_for(shapes_key: str, capo_fret: int) -> str:
    """Short explanation shown next to a suggestion."""
    if capo_fret == 0 and shapes_key in OPEN_SHAPE_KEYS:
        return f"No capo needed: classic open {shapes_key} shapes"
    if shapes_key in OPEN_SHAPE_KEYS:
        return f"Open {shapes_key} shapes (easy chord grips)"
    if capo_fret <= 2:
        return "Low capo, comfortable reach"
    return "Usable option"


def suggest_capos_for_target_key(
    target_key: str,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[CapoSuggestion]:
    """Rank capo positions for playing in ``target_key``.

    Every fret from 0 to 11 is scored; ties keep fret order.

    Parameters
    ----------
    target_key : str
        The key the music should sound in.
    limit : int
        How many suggestions to return (default 5).

    Returns
    -------
    list[CapoSuggestion]
        Best suggestions first.

    Examples
    --------
    >>> [(s.capo_fret, s.shapes_key) for s in suggest_capos_for_target_key("Bb", limit=3)]
    [(1, 'A'), (3, 'G'), (6, 'E')]
    """
    suggestions: list[CapoSuggestion] = []
    for fret in range(MAX_CAPO_FRET + 1):
        shapes_key = shapes_key_for(target_key, fret)
        suggestions.append(
            CapoSuggestion(
                capo_fret=fret,
                shapes_key=shapes_key,
                reason=reason_for(shapes_key, fret),
                score=score_capo(shapes_key, fret),
            )
        )

    ranked = sorted(suggestions, key=lambda s: s.score, reverse=True)
    return ranked[:limit]


def capo_shapes_text(text: str, target_key: str, capo_fret: int) -> str:
    """Rewrite a sounding chart as the shapes to finger behind a capo.

    Examples
    --------
    >>> capo_shapes_text("D A Bm G", "D", 2)
    'C G Am F'
    """
    return transpose_chord_text(text, -capo_fret, prefer_sharps_for_key(target_key))
