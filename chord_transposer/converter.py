"""Structured chords from chart symbols, read by pychord.

Chord detection in charts is lexical; pychord is consulted afterwards to
say what a chord-like token contains, so chord diagrams can list the
notes under each grip.
"""

from __future__ import annotations

from collections.abc import Iterable

from chord_transposer.models import Chord
from chord_transposer.pitch_class import (
    normalize_spelling,
    note_to_pc,
    prefer_sharps_for_key,
    spell,
)


def _normalize_bass(bass: str | None) -> str | None:
    """Normalize bass note, converting empty strings to None."""
    return bass if bass else None


def respell_tones(notes: Iterable[str], prefer_sharps: bool) -> tuple[str, ...]:
    """Respell chord tones with one kind of accidental.

    Notes outside the enharmonic table are kept as given.

    Examples
    --------
    >>> respell_tones(["A#", "D", "F"], False)
    ('Bb', 'D', 'F')
    >>> respell_tones(["Gb", "Bb", "Db"], True)
    ('F#', 'A#', 'C#')
    """
    tones: list[str] = []
    for note in notes:
        spelling = normalize_spelling(note)
        if spelling is None:
            tones.append(note)
        else:
            tones.append(spell(note_to_pc(spelling), prefer_sharps))
    return tuple(tones)


def from_pychord(chord_str: str, prefer_sharps: bool | None = None) -> Chord:
    """Parse a chord symbol with pychord.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C", "F#dim7/A").
    prefer_sharps : bool | None
        Accidentals for the chord tones. By default the chord's root is
        treated as a key, so "F7" gets an Eb and "E7" a G#.

    Returns
    -------
    Chord
        Root, pychord quality name, bass and chord tones.

    Raises
    ------
    ValueError
        If pychord cannot parse the symbol.

    Examples
    --------
    >>> chord = from_pychord("Am")
    >>> chord.root, chord.quality, chord.tones
    ('A', 'm', ('A', 'C', 'E'))
    >>> from_pychord("Bb7").tones
    ('Bb', 'D', 'F', 'Ab')
    """
    from pychord import Chord as PyChord

    pc = PyChord(chord_str)
    root = str(pc.root)
    if prefer_sharps is None:
        prefer_sharps = prefer_sharps_for_key(root)

    return Chord(
        root=root,
        quality=str(pc.quality),
        bass=_normalize_bass(pc.on),
        tones=respell_tones(pc.components(), prefer_sharps),
    )
