"""Tests for chart view assembly."""

from chord_transposer.share import ShareState
from chord_transposer.view import build_chart_view, chart_heading, chord_diagrams, diagram_section


def make_state(**overrides: object) -> ShareState:
    fields: dict[str, object] = {
        "title": "",
        "input": "C G Am F\nLet it be",
        "from_key": "C",
        "to_key": "D",
        "capo_fret": 2,
        "show_capo": False,
        "include_diagrams": False,
    }
    fields.update(overrides)
    return ShareState(**fields)  # type: ignore[arg-type]


class TestHeading:
    def test_title(self) -> None:
        assert chart_heading(make_state(title="Let It Be")) == "Let It Be - Transposed Chart"

    def test_blank_title_uses_keys(self) -> None:
        assert chart_heading(make_state(title="   ")) == "Transposed chart: C -> D"

    def test_no_keys(self) -> None:
        assert chart_heading(make_state(from_key="", to_key="")) == "Transposed Chart"


class TestBuildChartView:
    def test_sounding_chart(self) -> None:
        view = build_chart_view(make_state())
        assert view.sounding == "D A Bm G\nLet it be"
        assert view.shapes_key == "C"

    def test_capo_view_hidden_by_default(self) -> None:
        view = build_chart_view(make_state())
        assert view.capo_shapes == ""
        assert view.diagrams == ()

    def test_capo_view(self) -> None:
        view = build_chart_view(make_state(show_capo=True))
        assert view.capo_shapes == "C G Am F\nLet it be"

    def test_suggestions_for_target_key(self) -> None:
        view = build_chart_view(make_state(to_key="Bb"))
        assert [s.capo_fret for s in view.suggestions] == [1, 3, 6, 8, 10]

    def test_diagrams_for_sounding_chart(self) -> None:
        view = build_chart_view(make_state(include_diagrams=True))
        assert len(view.diagrams) == 1
        section = view.diagrams[0]
        assert section.title == "Transposed (sounds in D)"
        assert section.capo_fret == 0
        assert [c.symbol for c in section.chords] == ["D", "A", "Bm", "G"]
        assert all(c.shapes for c in section.chords)

    def test_diagrams_with_capo(self) -> None:
        view = build_chart_view(make_state(include_diagrams=True, show_capo=True))
        assert [s.title for s in view.diagrams] == [
            "Transposed (sounds in D)",
            "Capo shapes (key of C, capo 2)",
        ]
        capo_section = view.diagrams[1]
        assert capo_section.capo_fret == 2
        assert [c.symbol for c in capo_section.chords] == ["C", "G", "Am", "F"]
        assert capo_section.chords[0].shapes[0].family == "open"

    def test_diagram_tones(self) -> None:
        view = build_chart_view(make_state(include_diagrams=True))
        tones = {c.symbol: c.tones for c in view.diagrams[0].chords}
        assert tones["D"] == ("D", "F#", "A")
        assert tones["Bm"] == ("B", "D", "F#")

    def test_diagram_tones_follow_target_key(self) -> None:
        """Tones are spelled with the accidentals of the key the chart sounds in."""
        view = build_chart_view(make_state(input="C E", to_key="F", include_diagrams=True))
        tones = {c.symbol: c.tones for c in view.diagrams[0].chords}
        assert tones["A"] == ("A", "Db", "E")


class TestDiagramSection:
    def test_only_chord_tokens_listed(self) -> None:
        section = diagram_section("Intro", "Hmm | N.C. | C")
        assert [c.symbol for c in section.chords] == ["C"]

    def test_empty_chart(self) -> None:
        assert diagram_section("Empty", "").chords == ()


class TestChordDiagrams:
    def test_tones_and_shapes(self) -> None:
        entry = chord_diagrams("Bm")
        assert entry.symbol == "Bm"
        assert entry.tones == ("B", "D", "F#")
        assert entry.shapes[0].name == "Bm (A-shape barre @2)"

    def test_spelling_override(self) -> None:
        assert chord_diagrams("Eb", prefer_sharps=True).tones == ("D#", "G", "A#")

    def test_unknown_symbol(self) -> None:
        entry = chord_diagrams("Intro")
        assert entry.tones == ()
        assert entry.shapes == ()
