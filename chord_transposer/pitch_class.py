"""Pitch class arithmetic and enharmonic spelling.

This module maps note spellings onto the twelve pitch classes (0-11,
C=0) and back again, choosing sharp or flat names according to the
key a chart is being written in.
"""

from __future__ import annotations

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "B#": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
}

# Pitch class to note name
SHARP_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

NATURALS = "ABCDEFG"
ACCIDENTALS = "#b"

# Unicode accidentals as they appear in pasted charts
ACCIDENTAL_GLYPHS: dict[str, str] = {
    "♯": "#",
    "♭": "b",
}

SHARP_KEYS: frozenset[str] = frozenset({"G", "D", "A", "E", "B", "F#", "C#"})
FLAT_KEYS: frozenset[str] = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"})

# The fifteen key signatures offered to users, sharps then flats
ALL_KEYS: tuple[str, ...] = (
    "C",
    "G",
    "D",
    "A",
    "E",
    "B",
    "F#",
    "C#",
    "F",
    "Bb",
    "Eb",
    "Ab",
    "Db",
    "Gb",
    "Cb",
)


def normalize_spelling(raw: str | None) -> str | None:
    """Normalize a raw note token to a canonical spelling.

    Unicode sharp/flat glyphs are replaced by ``#``/``b``, surrounding
    whitespace is stripped and the note letter is uppercased.

    Parameters
    ----------
    raw : str | None
        The note as typed (e.g., "c#", " Bb ", "E♭").

    Returns
    -------
    str | None
        The canonical spelling, or None if the token is not a note.

    Examples
    --------
    >>> normalize_spelling("c#")
    'C#'
    >>> normalize_spelling("E♭")
    'Eb'
    >>> normalize_spelling("H") is None
    True
    """
    if not raw:
        return None

    text = raw
    for glyph, ascii_accidental in ACCIDENTAL_GLYPHS.items():
        text = text.replace(glyph, ascii_accidental)
    text = text.strip()
    if not text:
        return None

    spelling = text[0].upper() + text[1:]
    if spelling in NOTE_TO_PC:
        return spelling
    return None


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Canonical note name (e.g., "C", "F#", "Bb"). Callers holding raw
        user text should run it through :func:`normalize_spelling` first.

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Cb")
    11
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def spell(pitch_class: int, prefer_sharps: bool) -> str:
    """Spell a pitch class as a note name.

    Parameters
    ----------
    pitch_class : int
        Any integer; it is reduced modulo 12.
    prefer_sharps : bool
        Use sharp names (C#) rather than flat names (Db) for black keys.

    Returns
    -------
    str
        The note name.

    Examples
    --------
    >>> spell(1, True)
    'C#'
    >>> spell(1, False)
    'Db'
    >>> spell(-2, False)
    'Bb'
    """
    names = SHARP_NAMES if prefer_sharps else FLAT_NAMES
    return names[pitch_class % 12]


def prefer_sharps_for_key(key: str) -> bool:
    """Return whether a key signature is written with sharps.

    Enharmonically neutral or unknown keys lean sharp.

    Examples
    --------
    >>> prefer_sharps_for_key("D")
    True
    >>> prefer_sharps_for_key("Eb")
    False
    >>> prefer_sharps_for_key("C")
    True
    """
    if key in SHARP_KEYS:
        return True
    if key in FLAT_KEYS:
        return False
    return True


def root_spelling(raw: str | None) -> str | None:
    """Spelling of the note a token starts with.

    Reads the letter and an optional accidental, so key names such as
    "Am" or "Bbm" resolve to their tonic.

    Examples
    --------
    >>> root_spelling("Am"), root_spelling("bbm"), root_spelling("F♯m")
    ('A', 'Bb', 'F#')
    >>> root_spelling("Hm") is None
    True
    """
    if not raw:
        return None

    text = raw
    for glyph, ascii_accidental in ACCIDENTAL_GLYPHS.items():
        text = text.replace(glyph, ascii_accidental)
    text = text.strip()

    head = text[:2] if len(text) > 1 and text[1] in ACCIDENTALS else text[:1]
    return normalize_spelling(head)


def key_to_pc(key: str) -> int:
    """Pitch class of a key's tonic, counting unknown keys as C."""
    if key in NOTE_TO_PC:
        return NOTE_TO_PC[key]
    return NOTE_TO_PC[root_spelling(key) or "C"]


def semitone_steps_between(from_key: str, to_key: str) -> int:
    """Signed semitone distance from one key to another.

    The result is not reduced modulo 12, so it can be negative; a
    negative value transposes down. Keys are read by their tonic ("Am" counts
    as A) and unrecognized keys count as C.

    Parameters
    ----------
    from_key : str
        The key the chart is written in.
    to_key : str
        The key it should sound in.

    Returns
    -------
    int
        ``pc(to_key) - pc(from_key)``, in the range -11..11.

    Examples
    --------
    >>> semitone_steps_between("C", "D")
    2
    >>> semitone_steps_between("A", "C")
    -9
    >>> semitone_steps_between("nonsense", "G")
    7
    """
    return key_to_pc(to_key) - key_to_pc(from_key)


def to_sharp(note: str) -> str | None:
    """Respell a raw note with its sharp name.

    Examples
    --------
    >>> to_sharp("Bb")
    'A#'
    >>> to_sharp("Cb")
    'B'
    >>> to_sharp("X") is None
    True
    """
    spelling = normalize_spelling(note)
    if spelling is None:
        return None
    return SHARP_NAMES[NOTE_TO_PC[spelling]]
