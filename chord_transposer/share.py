"""Encoded chart state.

A chart, its keys and its capo settings travel as one URL-safe token:
compact JSON, UTF-8 encoded, base64url without padding.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# Wire field name -> (attribute name, accepted types)
_FIELDS: dict[str, tuple[str, tuple[type, ...]]] = {
    "title": ("title", (str,)),
    "input": ("input", (str,)),
    "fromKey": ("from_key", (str,)),
    "toKey": ("to_key", (str,)),
    "capoFret": ("capo_fret", (int, float)),
    "showCapo": ("show_capo", (bool,)),
    "includeDiagrams": ("include_diagrams", (bool,)),
}


@dataclass(frozen=True)
class ShareState:
    """Everything needed to reproduce a transposed chart.

    Parameters
    ----------
    title : str
        Song title; may be empty.
    input : str
        The chart as pasted, in ``from_key``.
    from_key : str
        Key the chart is written in.
    to_key : str
        Key the chart should sound in.
    capo_fret : int
        Capo position used for the capo-shapes view.
    show_capo : bool
        Whether the capo-shapes view is shown.
    include_diagrams : bool
        Whether chord diagrams accompany the chart.
    """

    title: str
    input: str
    from_key: str
    to_key: str
    capo_fret: int = 0
    show_capo: bool = False
    include_diagrams: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Wire representation with camelCase keys."""
        return {wire: getattr(self, attr) for wire, (attr, _) in _FIELDS.items()}

    @classmethod
    def from_dict(cls, data: Any) -> ShareState | None:
        """Build a state from its wire representation.

        Returns None when a field is missing or has the wrong type.

        Examples
        --------
        >>> ShareState.from_dict({"title": "x"}) is None
        True
        """
        if not isinstance(data, dict):
            return None

        values: dict[str, Any] = {}
        for wire, (attr, types) in _FIELDS.items():
            value = data.get(wire)
            # bool is an int subclass; only showCapo/includeDiagrams take booleans
            if isinstance(value, bool) and bool not in types:
                return None
            if not isinstance(value, types):
                return None
            if isinstance(value, float):
                if not value.is_integer():
                    return None
                value = int(value)
            values[attr] = value
        return cls(**values)


def _to_urlsafe(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _from_urlsafe(token: str) -> bytes:
    padding = -len(token) % 4
    return base64.urlsafe_b64decode(token + "=" * padding)


def encode_share_state(state: ShareState) -> str:
    """Encode a state as a URL-safe token.

    Examples
    --------
    >>> token = encode_share_state(ShareState(title="", input="C", from_key="C", to_key="D"))
    >>> decode_share_state(token).to_key
    'D'
    """
    payload = json.dumps(state.to_dict(), separators=(",", ":"), ensure_ascii=False)
    return _to_urlsafe(payload.encode("utf-8"))


def decode_share_state(token: str) -> ShareState | None:
    """Decode a token produced by :func:`encode_share_state`.

    Parameters
    ----------
    token : str
        URL-safe base64 text, with or without padding.

    Returns
    -------
    ShareState | None
        The state, or None if the token is malformed or incomplete.
    """
    if not token:
        return None

    try:
        payload = _from_urlsafe(token.strip()).decode("utf-8")
        data = json.loads(payload)
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        logger.debug("Rejected share token: %s", e)
        return None

    state = ShareState.from_dict(data)
    if state is None:
        logger.debug("Share token is missing fields or has wrong types")
    return state
