"""Tests for chord detection in charts."""

import pytest

from chord_transposer.chart.chord_detector import (
    MAX_CHORD_LENGTH,
    classify_token,
    classify_tokens,
    detect_hotspots,
    looks_like_chord,
    normalize_chart_text,
    parse_chord,
    tokenize_chart_line,
    unique_chords,
)
from chord_transposer.chart.models import Token


class TestLooksLikeChord:
    """Test the chord-likeness heuristic."""

    @pytest.mark.parametrize(
        "text",
        [
            "C",
            "G",
            "Am",
            "Bb",
            "F#",
            "Gm7",
            "Cmaj7",
            "CMaj7",
            "Bdim",
            "Faug",
            "C+",
            "Dsus4",
            "Asus2",
            "Cadd9",
            "C/E",
            "G/B",
            "F#m",
            "Bbm7",
            "Bb7/D",
            "F#m7b5",
            "Am7-5",
            "C°",
            "CΔ7",
            "Dmin",
        ],
    )
    def test_chords(self, text: str) -> None:
        """Chord symbols from real charts are recognized."""
        assert looks_like_chord(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "Take",
            "take",
            "am",
            "c",
            "Hello",
            "Upside",
            "world",
            "Verse",
            "I",
            "(G)",
            "C.",
            "",
        ],
    )
    def test_non_chords(self, text: str) -> None:
        """Lyrics, lowercase roots and punctuated tokens are rejected."""
        assert looks_like_chord(text) is False

    @pytest.mark.parametrize("text", ["C\n", "Am\n", "G7\r", "D "])
    def test_trailing_whitespace_is_not_a_chord(self, text: str) -> None:
        """The whole token must match, including its last character."""
        assert looks_like_chord(text) is False


class TestParseChord:
    """Test pychord-backed parsing."""

    def test_parse_simple_chord(self) -> None:
        chord = parse_chord("Gm7")
        assert chord is not None
        assert chord.root == "G"
        assert chord.quality == "m7"

    def test_parse_slash_chord(self) -> None:
        chord = parse_chord("C/E")
        assert chord is not None
        assert chord.root == "C"
        assert chord.bass == "E"

    def test_parse_gives_chord_tones(self) -> None:
        chord = parse_chord("F7")
        assert chord is not None
        assert chord.tones == ("F", "A", "C", "Eb")

    def test_tone_spelling_can_be_chosen(self) -> None:
        chord = parse_chord("F7", prefer_sharps=True)
        assert chord is not None
        assert chord.tones == ("F", "A", "C", "D#")

    def test_parse_invalid_returns_none(self) -> None:
        assert parse_chord("Hello") is None


class TestClassifyToken:
    """Test single token classification."""

    def test_classify_chord_token(self) -> None:
        classified = classify_token(Token(text="Gm7", start=0, end=3, kind="other"))
        assert classified.kind == "chord"
        assert classified.chord is not None
        assert classified.chord.root == "G"

    def test_chord_like_but_unparseable(self) -> None:
        """The heuristic decides the kind even when pychord gives up."""
        classified = classify_token(Token(text="Cmadd", start=0, end=5, kind="other"))
        assert classified.kind == "chord"
        assert classified.chord is None

    def test_classify_word_token(self) -> None:
        classified = classify_token(Token(text="Hello", start=0, end=5, kind="other"))
        assert classified.kind == "word"
        assert classified.chord is None

    def test_classify_punct_token(self) -> None:
        classified = classify_token(Token(text="|", start=0, end=1, kind="other"))
        assert classified.kind == "punct"

    def test_overlong_token_is_not_a_chord(self) -> None:
        text = "A" * (MAX_CHORD_LENGTH + 1)
        classified = classify_token(Token(text=text, start=0, end=len(text), kind="other"))
        assert classified.kind == "word"

    def test_classify_tokens(self) -> None:
        tokens = [
            Token(text="Gm", start=0, end=2, kind="other"),
            Token(text="Hello", start=3, end=8, kind="other"),
        ]
        assert [t.kind for t in classify_tokens(tokens)] == ["chord", "word"]


class TestTokenizeChartLine:
    """Test line tokenization with punctuation splitting."""

    def test_bracketed_chord(self) -> None:
        tokens = tokenize_chart_line("(G)  Take")
        assert [(t.text, t.kind, t.start) for t in tokens] == [
            ("(", "punct", 0),
            ("G", "chord", 1),
            (")", "punct", 2),
            ("Take", "word", 5),
        ]


class TestDetectHotspots:
    """Test locating chords in multi-line charts."""

    CHART = "C       G       Am      F\nTake these chords and move them\n| C/E  (F) |"

    def test_positions(self) -> None:
        hotspots = detect_hotspots(self.CHART)
        assert [(h.chord, h.line, h.col) for h in hotspots] == [
            ("C", 0, 0),
            ("G", 0, 8),
            ("Am", 0, 16),
            ("F", 0, 24),
            ("C/E", 2, 2),
            ("F", 2, 8),
        ]

    def test_length(self) -> None:
        hotspots = detect_hotspots("x Cmaj7")
        assert hotspots[0].length == 5

    def test_tabs_expanded_before_measuring(self) -> None:
        hotspots = detect_hotspots("\tG")
        assert hotspots[0].col == 4

    def test_crlf_line_endings(self) -> None:
        hotspots = detect_hotspots("C\r\nG\rD")
        assert [(h.chord, h.line) for h in hotspots] == [("C", 0), ("G", 1), ("D", 2)]

    def test_no_chords(self) -> None:
        assert detect_hotspots("just some lyrics here") == []

    def test_normalize_chart_text(self) -> None:
        assert normalize_chart_text("a\tb\r\nc") == "a    b\nc"


class TestUniqueChords:
    """Test distinct chord listing."""

    def test_first_appearance_order(self) -> None:
        assert unique_chords("G D Em C\nG D C (Em)") == ["G", "D", "Em", "C"]

    def test_empty(self) -> None:
        assert unique_chords("") == []
