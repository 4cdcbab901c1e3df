"""Tests for encoded chart state."""

import base64
import json
import logging

import pytest

from chord_transposer.share import ShareState, decode_share_state, encode_share_state


def make_token(payload: object) -> str:
    """Encode an arbitrary JSON payload the way share tokens are encoded."""
    raw = json.dumps(payload).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


@pytest.fixture
def state() -> ShareState:
    return ShareState(
        title="Wonderwall",
        input="Em7  G  Dsus4  A7sus4\nToday is gonna be the day",
        from_key="G",
        to_key="A",
        capo_fret=2,
        show_capo=True,
        include_diagrams=False,
    )


class TestShareStateDict:
    """Wire representation."""

    def test_camel_case_keys(self, state: ShareState) -> None:
        assert state.to_dict() == {
            "title": "Wonderwall",
            "input": "Em7  G  Dsus4  A7sus4\nToday is gonna be the day",
            "fromKey": "G",
            "toKey": "A",
            "capoFret": 2,
            "showCapo": True,
            "includeDiagrams": False,
        }

    def test_from_dict_round_trip(self, state: ShareState) -> None:
        assert ShareState.from_dict(state.to_dict()) == state

    def test_integral_float_capo_accepted(self, state: ShareState) -> None:
        data = state.to_dict() | {"capoFret": 3.0}
        restored = ShareState.from_dict(data)
        assert restored is not None
        assert restored.capo_fret == 3
        assert isinstance(restored.capo_fret, int)

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("title", None),
            ("input", 42),
            ("fromKey", ["G"]),
            ("toKey", None),
            ("capoFret", "2"),
            ("capoFret", True),
            ("capoFret", 2.5),
            ("showCapo", 1),
            ("includeDiagrams", "false"),
        ],
    )
    def test_wrong_types_rejected(self, state: ShareState, field: str, value: object) -> None:
        data = state.to_dict() | {field: value}
        assert ShareState.from_dict(data) is None

    def test_missing_field_rejected(self, state: ShareState) -> None:
        data = state.to_dict()
        del data["showCapo"]
        assert ShareState.from_dict(data) is None

    def test_not_a_dict(self) -> None:
        assert ShareState.from_dict(["title"]) is None


class TestEncodeDecode:
    """Token encoding."""

    def test_round_trip(self, state: ShareState) -> None:
        assert decode_share_state(encode_share_state(state)) == state

    def test_token_is_url_safe(self, state: ShareState) -> None:
        token = encode_share_state(state)
        assert "=" not in token
        assert "+" not in token
        assert "/" not in token

    def test_payload_is_compact_json(self, state: ShareState) -> None:
        token = encode_share_state(state)
        raw = base64.urlsafe_b64decode(token + "=" * (-len(token) % 4)).decode("utf-8")
        assert ", " not in raw.replace(state.input, "")
        assert json.loads(raw)["toKey"] == "A"

    def test_unicode_round_trip(self) -> None:
        state = ShareState(title="Café ♯", input="C♯m  E♭", from_key="E", to_key="F")
        assert decode_share_state(encode_share_state(state)) == state

    def test_padding_tolerated(self, state: ShareState) -> None:
        token = encode_share_state(state)
        padded = token + "=" * (-len(token) % 4)
        assert decode_share_state(padded) == state

    def test_hand_built_token(self) -> None:
        token = make_token(
            {
                "title": "",
                "input": "C G",
                "fromKey": "C",
                "toKey": "D",
                "capoFret": 0,
                "showCapo": False,
                "includeDiagrams": True,
            }
        )
        decoded = decode_share_state(token)
        assert decoded is not None
        assert decoded.include_diagrams is True


class TestDecodeFailures:
    """Malformed tokens decode to None."""

    @pytest.mark.parametrize("token", ["", "a", "%%%%", "bm90IGpzb24"])
    def test_garbage(self, token: str) -> None:
        assert decode_share_state(token) is None

    def test_json_but_incomplete(self) -> None:
        assert decode_share_state(make_token({"title": "x"})) is None

    def test_json_array(self) -> None:
        assert decode_share_state(make_token([1, 2, 3])) is None

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="chord_transposer.share"):
            decode_share_state("bm90IGpzb24")
        assert "Rejected share token" in caplog.text
