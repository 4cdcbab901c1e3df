"""Guitar voicings for chord symbols.

Two look-up strategies are merged here: a curated table of open-position
shapes, and movable barre shapes generated for any root from E-shape and
A-shape templates.

Positions run from the low E string (index 0) to the high E string
(index 5): -1 is a muted string, 0 an open string, and any other value a
fret counted from the shape's base fret (1 = base fret).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from chord_transposer.models import Barre, ChordSymbol, Shape, ShapeQuality
from chord_transposer.pitch_class import SHARP_NAMES, to_sharp

CoarseQuality = Literal["maj", "min", "7", "maj7", "m7", "sus4", "add9", "majLike"]
BarreQuality = Literal["maj", "min", "7"]
BarreSystem = Literal["E", "A"]

# Root letter plus optional accidental, then anything (slash bass included)
LOOKUP_SYMBOL_RE = re.compile(r"^([A-Ga-g][#b♯♭]?)(.*)$")

# "m" as a minor marker, but not the "m" of "maj"; "dim" has no word
# boundary before its "m" so it is not minor either
MINOR_RE = re.compile(r"\bm(?!aj)")

# Base fret windows for generated barres
LOWEST_BARRE_FRET = 1
HIGHEST_BARRE_FRET = 12
OCTAVE_BARRE_FRETS = range(13, 18)

# Open-shape table suffix for each coarse quality
OPEN_KEY_SUFFIX: dict[str, str] = {
    "min": "m",
    "7": "7",
    "maj7": "maj7",
    "m7": "m7",
    "sus4": "sus4",
    "add9": "add9",
    "majLike": "",
}


def _open(
    name: str,
    positions: tuple[int, ...],
    quality: ShapeQuality,
    short_name: str | None = None,
) -> Shape:
    return Shape(
        name=name,
        short_name=short_name or name,
        positions=positions,
        base_fret=1,
        quality=quality,
        family="open",
    )


OPEN_SHAPES: dict[str, Shape] = {
    # Majors
    "C": _open("C", (-1, 3, 2, 0, 1, 0), "maj"),
    "D": _open("D", (-1, -1, 0, 2, 3, 2), "maj"),
    "E": _open("E", (0, 2, 2, 1, 0, 0), "maj"),
    "G": _open("G", (3, 2, 0, 0, 0, 3), "maj"),
    "A": _open("A", (-1, 0, 2, 2, 2, 0), "maj"),
    "F": _open("F (lite)", (-1, -1, 3, 2, 1, 1), "maj", short_name="F"),
    # Maj7
    "Cmaj7": _open("Cmaj7", (-1, 3, 2, 0, 0, 0), "maj7"),
    "Amaj7": _open("Amaj7", (-1, 0, 2, 1, 2, 0), "maj7"),
    "Dmaj7": _open("Dmaj7", (-1, -1, 0, 2, 2, 2), "maj7"),
    "Fmaj7": _open("Fmaj7", (-1, -1, 3, 2, 1, 0), "maj7"),
    # Minors
    "Am": _open("Am", (-1, 0, 2, 2, 1, 0), "min"),
    "Dm": _open("Dm", (-1, -1, 0, 2, 3, 1), "min"),
    "Em": _open("Em", (0, 2, 2, 0, 0, 0), "min"),
    # m7
    "Am7": _open("Am7", (-1, 0, 2, 0, 1, 0), "m7"),
    "Em7": _open("Em7", (0, 2, 2, 0, 3, 0), "m7"),
    # Dominant 7ths
    "C7": _open("C7", (-1, 3, 2, 3, 1, 0), "7"),
    "D7": _open("D7", (-1, -1, 0, 2, 1, 2), "7"),
    "E7": _open("E7", (0, 2, 0, 1, 0, 0), "7"),
    "G7": _open("G7", (3, 2, 0, 0, 0, 1), "7"),
    "A7": _open("A7", (-1, 0, 2, 0, 2, 0), "7"),
    # sus4
    "Asus4": _open("Asus4", (-1, 0, 2, 2, 3, 0), "sus4"),
    "Dsus4": _open("Dsus4", (-1, -1, 0, 2, 3, 3), "sus4"),
    # add9
    "Cadd9": _open("Cadd9", (-1, 3, 2, 0, 3, 3), "add9"),
    "Gadd9": _open("Gadd9", (3, 2, 0, 0, 3, 0), "add9"),
}


@dataclass(frozen=True)
class BarreTemplate:
    """A movable shape with its root on the lowest fretted string.

    Parameters
    ----------
    positions : tuple[int, ...]
        Frets relative to the base fret.
    barre : Barre
        The index-finger barre.
    open_string : str
        The open string the root sits on ("E" or "A").
    family : str
        Shape family recorded on generated shapes.
    """

    positions: tuple[int, ...]
    barre: Barre
    open_string: str
    family: Literal["barre-e", "barre-a"]


_E_BARRE = Barre(from_string=0, to_string=5, fret=1)
_A_BARRE = Barre(from_string=1, to_string=5, fret=1)

BARRE_TEMPLATES: dict[tuple[BarreSystem, BarreQuality], BarreTemplate] = {
    ("E", "maj"): BarreTemplate((1, 3, 3, 2, 1, 1), _E_BARRE, "E", "barre-e"),
    ("E", "min"): BarreTemplate((1, 3, 3, 1, 1, 1), _E_BARRE, "E", "barre-e"),
    ("E", "7"): BarreTemplate((1, 3, 1, 2, 1, 1), _E_BARRE, "E", "barre-e"),
    ("A", "maj"): BarreTemplate((-1, 1, 3, 3, 3, 1), _A_BARRE, "A", "barre-a"),
    ("A", "min"): BarreTemplate((-1, 1, 3, 3, 2, 1), _A_BARRE, "A", "barre-a"),
    ("A", "7"): BarreTemplate((-1, 1, 3, 1, 3, 1), _A_BARRE, "A", "barre-a"),
}

BARRE_SUFFIX: dict[str, str] = {"maj": "", "min": "m", "7": "7"}


def semitone_distance(open_note: str, target: str) -> int:
    """Fret (0-11) at which ``target`` sounds on a string tuned to ``open_note``.

    Both notes must be sharp spellings.

    Examples
    --------
    >>> semitone_distance("E", "F#")
    2
    >>> semitone_distance("A", "F#")
    9
    """
    return (SHARP_NAMES.index(target) - SHARP_NAMES.index(open_note)) % 12


def comfortable_base_fret(fret: int) -> int:
    """Base fret for a barre whose root lands on ``fret``.

    Fret 0 would put the barre on the nut, so the octave (12) is used.

    Examples
    --------
    >>> comfortable_base_fret(0)
    12
    >>> comfortable_base_fret(7)
    7
    """
    if fret == 0:
        return HIGHEST_BARRE_FRET
    return max(LOWEST_BARRE_FRET, min(HIGHEST_BARRE_FRET, fret))


def make_barre(root: str, quality: BarreQuality, system: BarreSystem, base_fret: int) -> Shape:
    """Build one barre voicing from a template.

    Examples
    --------
    >>> make_barre("F#", "min", "E", 2).name
    'F#m (E-shape barre @2)'
    """
    template = BARRE_TEMPLATES[(system, quality)]
    short_name = f"{root}{BARRE_SUFFIX[quality]}"
    return Shape(
        name=f"{short_name} ({system}-shape barre @{base_fret})",
        short_name=short_name,
        positions=template.positions,
        base_fret=base_fret,
        barres=(template.barre,),
        quality=quality,
        family=template.family,
    )


def generate_barres_for(root: str, quality: BarreQuality) -> list[Shape]:
    """Generate E-shape and A-shape barres for a root.

    Each system contributes its comfortable position and, when it lands
    on frets 13-17, the same shape an octave higher.

    Parameters
    ----------
    root : str
        Sharp spelling of the root (e.g., "F#").
    quality : BarreQuality
        "maj", "min" or "7".

    Returns
    -------
    list[Shape]
        Voicings sorted by ascending base fret.

    Examples
    --------
    >>> [s.name for s in generate_barres_for("G", "maj")]
    ['G (E-shape barre @3)', 'G (A-shape barre @10)', 'G (E-shape barre @15)']
    """
    shapes: list[Shape] = []
    for system in ("E", "A"):
        template = BARRE_TEMPLATES[(system, quality)]
        base = comfortable_base_fret(semitone_distance(template.open_string, root))
        if LOWEST_BARRE_FRET <= base <= HIGHEST_BARRE_FRET:
            shapes.append(make_barre(root, quality, system, base))
        octave = base + 12
        if octave in OCTAVE_BARRE_FRETS:
            shapes.append(make_barre(root, quality, system, octave))

    return sorted(shapes, key=lambda s: s.base_fret)


def split_symbol(symbol: str) -> ChordSymbol | None:
    """Split a chord symbol for voicing look-up.

    The root is respelled with sharps and the tail, slash bass included,
    is lowercased.

    Examples
    --------
    >>> split_symbol("Bbmaj7")
    ChordSymbol(root='A#', tail='maj7')
    >>> split_symbol("N.C.") is None
    True
    """
    match = LOOKUP_SYMBOL_RE.match(symbol.strip())
    if match is None:
        return None
    root = to_sharp(match.group(1))
    if root is None:
        return None
    return ChordSymbol(root=root, tail=match.group(2).lower())


def coarse_quality(tail: str) -> CoarseQuality:
    """Bucket a lowercased chord tail into a coarse quality.

    The tests run in a fixed order: "maj7" is checked before any minor
    test so that "maj" is never read as minor.

    Examples
    --------
    >>> [coarse_quality(t) for t in ("maj7", "m7b5", "min", "dim7", "sus4", "add9", "6")]
    ['maj7', 'm7', 'min', '7', 'sus4', 'add9', 'majLike']
    """
    if "maj7" in tail:
        return "maj7"
    is_minor = MINOR_RE.search(tail) is not None
    if is_minor and "7" in tail:
        return "m7"
    if is_minor:
        return "min"
    if "7" in tail:
        return "7"
    if "sus4" in tail:
        return "sus4"
    if "add9" in tail:
        return "add9"
    return "majLike"


def barre_quality_for(quality: CoarseQuality) -> BarreQuality:
    """Nearest barre template quality for a coarse quality."""
    if quality in ("min", "m7"):
        return "min"
    if quality == "7":
        return "7"
    return "maj"


def open_shape_for(root: str, quality: CoarseQuality) -> Shape | None:
    """Curated open shape for the exact quality, else the plain major one."""
    exact = OPEN_SHAPES.get(f"{root}{OPEN_KEY_SUFFIX[quality]}")
    if exact is not None:
        return exact
    return OPEN_SHAPES.get(root)


def find_voicings_for(symbol: str) -> list[Shape]:
    """Return the voicings to offer for a chord symbol.

    Parameters
    ----------
    symbol : str
        A chord symbol as it appears in a chart (e.g., "F#m", "Bb7/D").

    Returns
    -------
    list[Shape]
        Open shapes first, then generated barres by ascending base fret;
        empty when the symbol has no recognizable root.

    Examples
    --------
    >>> [s.name for s in find_voicings_for("Am")]
    ['Am', 'Am (E-shape barre @5)', 'Am (A-shape barre @12)', 'Am (E-shape barre @17)']
    >>> find_voicings_for("Intro")
    []
    """
    parsed = split_symbol(symbol)
    if parsed is None:
        return []

    quality = coarse_quality(parsed.tail)

    voicings: list[Shape] = []
    open_shape = open_shape_for(parsed.root, quality)
    if open_shape is not None:
        voicings.append(open_shape)
    voicings.extend(generate_barres_for(parsed.root, barre_quality_for(quality)))

    # De-duplicate by (family, base fret, name)
    seen: set[tuple[str | None, int, str]] = set()
    unique: list[Shape] = []
    for shape in voicings:
        key = (shape.family, shape.base_fret, shape.name)
        if key in seen:
            continue
        seen.add(key)
        unique.append(shape)

    return sorted(unique, key=lambda s: (s.family != "open", s.base_fret))
