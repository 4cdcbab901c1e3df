"""Value types shared across chord-transposer.

Everything here is a frozen dataclass: chord symbols, parsed chords,
fretboard shapes and capo suggestions are computed per call and never
mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ShapeQuality = Literal["maj", "min", "7", "maj7", "m7", "sus4", "add9"]
ShapeFamily = Literal["open", "barre-e", "barre-a"]

STRING_COUNT = 6


@dataclass(frozen=True)
class ChordSymbol:
    """A chord token split into its root and the untouched remainder.

    Parameters
    ----------
    root : str
        Canonical root spelling (e.g., "Bb").
    tail : str
        Quality/extension text after the root (e.g., "m7", "sus4").

    Examples
    --------
    >>> ChordSymbol(root="Bb", tail="m7").text
    'Bbm7'
    """

    root: str
    tail: str = ""

    @property
    def text(self) -> str:
        """The symbol as written."""
        return f"{self.root}{self.tail}"


@dataclass(frozen=True)
class Chord:
    """A chart chord as pychord understands it.

    Parameters
    ----------
    root : str
        The root note of the chord (e.g., "C", "F#", "Bb").
    quality : str
        pychord's name for the quality ("" for major, "m7", "sus4", ...).
    bass : str | None
        The bass note if different from root (for slash chords).
    tones : tuple[str, ...]
        The notes the chord contains, spelled with the root's accidentals.

    Examples
    --------
    >>> chord = Chord(root="G", quality="m7", tones=("G", "Bb", "D", "F"))
    >>> chord.symbol
    'Gm7'
    >>> str(Chord(root="C", quality="", bass="E"))
    'C/E'
    """

    root: str
    quality: str
    bass: str | None = None
    tones: tuple[str, ...] = ()

    @property
    def symbol(self) -> str:
        """The chord written back as a symbol (e.g., "Gm7", "C/E")."""
        result = f"{self.root}{self.quality}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Barre:
    """One finger laid across several strings.

    Parameters
    ----------
    from_string : int
        Lowest string covered (0 = low E).
    to_string : int
        Highest string covered (5 = high E).
    fret : int
        Fret relative to the shape's base fret (1 = base fret).
    """

    from_string: int
    to_string: int
    fret: int


@dataclass(frozen=True)
class Shape:
    """A fretboard diagram for one chord voicing.

    Parameters
    ----------
    name : str
        Display name (e.g., "F#m (E-shape barre @2)").
    short_name : str
        The bare chord symbol (e.g., "F#m").
    positions : tuple[int, ...]
        One entry per string, low E to high E: -1 muted, 0 open,
        otherwise a fret relative to ``base_fret``.
    base_fret : int
        Absolute fret drawn as the first row (1 = nut).
    barres : tuple[Barre, ...]
        Barres to draw, if any.
    quality : ShapeQuality | None
        Coarse quality the shape voices.
    family : ShapeFamily | None
        Where the shape comes from: curated open shape or barre template.

    Examples
    --------
    >>> shape = Shape(name="C", short_name="C", positions=(-1, 3, 2, 0, 1, 0), base_fret=1)
    >>> shape.fret_string()
    'x32010'
    """

    name: str
    short_name: str
    positions: tuple[int, ...]
    base_fret: int
    barres: tuple[Barre, ...] = ()
    quality: ShapeQuality | None = None
    family: ShapeFamily | None = None

    def __post_init__(self) -> None:
        if len(self.positions) != STRING_COUNT:
            msg = f"Shape {self.name!r} needs {STRING_COUNT} positions, got {len(self.positions)}"
            raise ValueError(msg)

    def absolute_frets(self) -> tuple[int, ...]:
        """Absolute fret per string (-1 muted, 0 open)."""
        return tuple(p if p <= 0 else self.base_fret + p - 1 for p in self.positions)

    def fret_string(self) -> str:
        """Compact fingering such as "x32010" or "2-4-4-2-2-2" past fret 9.

        Examples
        --------
        >>> Shape(name="Bm", short_name="Bm", positions=(-1, 1, 3, 3, 2, 1), base_fret=2).fret_string()
        'x24432'
        """
        frets = self.absolute_frets()
        parts = ["x" if f < 0 else str(f) for f in frets]
        if any(f > 9 for f in frets):
            return "-".join(parts)
        return "".join(parts)


@dataclass(frozen=True)
class CapoSuggestion:
    """A ranked capo position for playing in a target key.

    Parameters
    ----------
    capo_fret : int
        Fret the capo sits on (0 = no capo).
    shapes_key : str
        Key whose chord shapes are fingered behind the capo.
    reason : str
        Short human-readable explanation.
    score : float
        Ranking score; higher is better.
    """

    capo_fret: int
    shapes_key: str
    reason: str
    score: float
