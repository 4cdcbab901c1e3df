"""Assemble everything a chart page shows from one encoded state.

The view is plain data: the sounding chart, the capo-shapes chart, capo
suggestions and, optionally, the voicings and chord tones for every chord
that appears.
Drawing it is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from chord_transposer.capo import capo_shapes_text, shapes_key_for, suggest_capos_for_target_key
from chord_transposer.chart import parse_chord, unique_chords
from chord_transposer.models import CapoSuggestion, Shape
from chord_transposer.pitch_class import prefer_sharps_for_key
from chord_transposer.share import ShareState
from chord_transposer.transpose import transpose_chart
from chord_transposer.voicings import find_voicings_for

DEFAULT_HEADING = "Transposed Chart"


@dataclass(frozen=True)
class ChordDiagrams:
    """Voicings and chord tones for one symbol; either may be empty."""

    symbol: str
    shapes: tuple[Shape, ...]
    tones: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiagramSection:
    """A titled group of chord diagrams.

    Parameters
    ----------
    title : str
        Section heading.
    capo_fret : int
        Capo label for the diagrams (0 = none).
    chords : tuple[ChordDiagrams, ...]
        One entry per distinct chord, in order of appearance.
    """

    title: str
    capo_fret: int
    chords: tuple[ChordDiagrams, ...]


@dataclass(frozen=True)
class ChartView:
    """Everything derived from a :class:`ShareState`."""

    heading: str
    sounding: str
    shapes_key: str
    capo_shapes: str
    suggestions: tuple[CapoSuggestion, ...]
    diagrams: tuple[DiagramSection, ...]


def chart_heading(state: ShareState) -> str:
    """Heading for a chart.

    Examples
    --------
    >>> chart_heading(ShareState(title=" Wonderwall ", input="", from_key="G", to_key="A"))
    'Wonderwall - Transposed Chart'
    >>> chart_heading(ShareState(title="", input="", from_key="G", to_key="A"))
    'Transposed chart: G -> A'
    """
    title = state.title.strip()
    if title:
        return f"{title} - {DEFAULT_HEADING}"
    if state.from_key and state.to_key:
        return f"Transposed chart: {state.from_key} -> {state.to_key}"
    return DEFAULT_HEADING


def chord_diagrams(symbol: str, prefer_sharps: bool | None = None) -> ChordDiagrams:
    """Voicings for a symbol plus the notes pychord finds in it.

    Examples
    --------
    >>> entry = chord_diagrams("Bm")
    >>> entry.tones, entry.shapes[0].name
    (('B', 'D', 'F#'), 'Bm (A-shape barre @2)')
    """
    chord = parse_chord(symbol, prefer_sharps)
    return ChordDiagrams(
        symbol=symbol,
        shapes=tuple(find_voicings_for(symbol)),
        tones=chord.tones if chord is not None else (),
    )


def diagram_section(
    title: str,
    text: str,
    capo_fret: int = 0,
    prefer_sharps: bool | None = None,
) -> DiagramSection:
    """Voicings for every distinct chord in ``text``."""
    chords = tuple(chord_diagrams(symbol, prefer_sharps) for symbol in unique_chords(text))
    return DiagramSection(title=title, capo_fret=capo_fret, chords=chords)


def build_chart_view(state: ShareState) -> ChartView:
    """Compute the full chart view for a state.

    Parameters
    ----------
    state : ShareState
        Decoded chart state.

    Returns
    -------
    ChartView
        Sounding chart in ``to_key``; capo shapes only when
        ``show_capo`` is set; diagram sections only when
        ``include_diagrams`` is set.

    Examples
    --------
    >>> state = ShareState(title="", input="C G Am F", from_key="C", to_key="D",
    ...                    capo_fret=2, show_capo=True)
    >>> view = build_chart_view(state)
    >>> view.sounding, view.shapes_key, view.capo_shapes
    ('D A Bm G', 'C', 'C G Am F')
    """
    sounding = transpose_chart(state.input, state.from_key, state.to_key)
    shapes_key = shapes_key_for(state.to_key, state.capo_fret)
    capo_shapes = (
        capo_shapes_text(sounding, state.to_key, state.capo_fret) if state.show_capo else ""
    )

    # Chord tones follow the accidentals the charts themselves are spelled in
    prefer_sharps = prefer_sharps_for_key(state.to_key)
    diagrams: list[DiagramSection] = []
    if state.include_diagrams:
        diagrams.append(
            diagram_section(f"Transposed (sounds in {state.to_key})", sounding, 0, prefer_sharps)
        )
        if state.show_capo:
            diagrams.append(
                diagram_section(
                    f"Capo shapes (key of {shapes_key}, capo {state.capo_fret})",
                    capo_shapes,
                    state.capo_fret,
                    prefer_sharps,
                )
            )

    return ChartView(
        heading=chart_heading(state),
        sounding=sounding,
        shapes_key=shapes_key,
        capo_shapes=capo_shapes,
        suggestions=tuple(suggest_capos_for_target_key(state.to_key)),
        diagrams=tuple(diagrams),
    )
