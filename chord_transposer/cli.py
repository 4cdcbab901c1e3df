"""Command-line front end for chord-transposer.

Usage:
    chord-transposer <input_file> --from C --to D [--capo 2 --show-capo]
    chord-transposer --state <token>
    chord-transposer --voicings F#m Bb7

Examples:
    chord-transposer song.txt --from G --to A
    cat song.txt | chord-transposer - --from G --to Bb --suggest-capo
    chord-transposer song.txt --from C --to E --capo 4 --show-capo --diagrams --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from chord_transposer.models import Shape
from chord_transposer.pitch_class import ALL_KEYS
from chord_transposer.share import ShareState, decode_share_state, encode_share_state
from chord_transposer.view import ChartView, build_chart_view, chord_diagrams

logger = logging.getLogger(__name__)

CAPO_FRETS = range(12)


def shape_to_dict(shape: Shape) -> dict[str, Any]:
    """Convert a Shape to a JSON-serializable dict."""
    data = asdict(shape)
    data["positions"] = list(shape.positions)
    data["fingering"] = shape.fret_string()
    return data


def view_to_dict(view: ChartView) -> dict[str, Any]:
    """Convert a ChartView to a JSON-serializable dict."""
    return {
        "heading": view.heading,
        "sounding": view.sounding,
        "shapes_key": view.shapes_key,
        "capo_shapes": view.capo_shapes,
        "suggestions": [asdict(s) for s in view.suggestions],
        "diagrams": [
            {
                "title": section.title,
                "capo_fret": section.capo_fret,
                "chords": [
                    {
                        "symbol": c.symbol,
                        "tones": list(c.tones),
                        "shapes": [shape_to_dict(s) for s in c.shapes],
                    }
                    for c in section.chords
                ],
            }
            for section in view.diagrams
        ],
    }


def format_symbol(symbol: str, tones: tuple[str, ...]) -> str:
    """Chord symbol followed by its tones, e.g. "Bm (B D F#)"."""
    if not tones:
        return symbol
    return f"{symbol} ({' '.join(tones)})"


def format_shape(shape: Shape) -> str:
    """One-line text rendering of a voicing."""
    return f"{shape.name:<28} {shape.fret_string():<14} base fret {shape.base_fret}"


def format_view(view: ChartView, state: ShareState, suggest: bool) -> str:
    """Plain-text rendering of a chart view."""
    lines = [view.heading, "", view.sounding.rstrip("\n")]

    if state.show_capo:
        lines += [
            "",
            f"Capo shapes (key of {view.shapes_key}, capo {state.capo_fret})",
            "",
            view.capo_shapes.rstrip("\n"),
        ]

    if suggest:
        lines += ["", f"Capo suggestions for {state.to_key}:"]
        for s in view.suggestions:
            lines.append(f"  capo {s.capo_fret:>2}  {s.shapes_key:<3} {s.reason}")

    for section in view.diagrams:
        lines += ["", section.title]
        for chord in section.chords:
            if not chord.shapes:
                lines.append(f"  {format_symbol(chord.symbol, chord.tones)}: no diagram")
                continue
            lines.append(f"  {format_symbol(chord.symbol, chord.tones)}:")
            lines.extend(f"    {format_shape(shape)}" for shape in chord.shapes)

    return "\n".join(lines)


def read_chart(source: str) -> str:
    """Read chart text from a file path, or stdin for "-"."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chord-transposer",
        description="Transpose a chord chart, suggest capo positions and list voicings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s song.txt --from G --to A
  %(prog)s song.txt --from C --to E --capo 4 --show-capo
  %(prog)s --state <token> --diagrams
  %(prog)s --voicings F#m Bb7
        """,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Chart file to transpose (default: stdin)",
    )
    parser.add_argument(
        "--from",
        dest="from_key",
        choices=ALL_KEYS,
        default="C",
        help="Key the chart is written in",
    )
    parser.add_argument(
        "--to",
        dest="to_key",
        choices=ALL_KEYS,
        default="C",
        help="Key the chart should sound in",
    )
    parser.add_argument("--title", default="", help="Song title")
    parser.add_argument("--capo", type=int, choices=CAPO_FRETS, default=0, help="Capo fret (0-11)")
    parser.add_argument("--show-capo", action="store_true", help="Also print the shapes to play behind the capo")
    parser.add_argument("--diagrams", action="store_true", help="List voicings for every chord in the chart")
    parser.add_argument("--suggest-capo", action="store_true", help="Rank capo positions for the target key")
    parser.add_argument("--voicings", nargs="+", metavar="SYMBOL", help="Only list voicings for these chord symbols")
    parser.add_argument("--state", metavar="TOKEN", help="Load the chart and settings from an encoded state token")
    parser.add_argument("--encode", action="store_true", help="Print the encoded state token instead of the chart")
    parser.add_argument("--json", action="store_true", help="Emit JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_state(args: argparse.Namespace) -> ShareState | None:
    """Build the chart state from a token or from the command line."""
    if args.state:
        state = decode_share_state(args.state)
        if state is None:
            return None
        # Command-line switches can only add views to a shared chart
        return ShareState(
            title=state.title,
            input=state.input,
            from_key=state.from_key,
            to_key=state.to_key,
            capo_fret=state.capo_fret,
            show_capo=state.show_capo or args.show_capo,
            include_diagrams=state.include_diagrams or args.diagrams,
        )

    return ShareState(
        title=args.title,
        input=read_chart(args.input),
        from_key=args.from_key,
        to_key=args.to_key,
        capo_fret=args.capo,
        show_capo=args.show_capo,
        include_diagrams=args.diagrams,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.voicings:
        result = [chord_diagrams(symbol) for symbol in args.voicings]
        if args.json:
            data = {c.symbol: [shape_to_dict(s) for s in c.shapes] for c in result}
            print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            for entry in result:
                print(f"{format_symbol(entry.symbol, entry.tones)}:")
                if not entry.shapes:
                    print("  no diagram")
                for shape in entry.shapes:
                    print(f"  {format_shape(shape)}")
        return 0

    try:
        state = load_state(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read chart: {e}", file=sys.stderr)
        return 1

    if state is None:
        print("Error: invalid or incomplete state token", file=sys.stderr)
        return 1

    logger.debug("Transposing %s -> %s (capo %s)", state.from_key, state.to_key, state.capo_fret)

    if args.encode:
        print(encode_share_state(state))
        return 0

    view = build_chart_view(state)
    if args.json:
        print(json.dumps(view_to_dict(view), indent=2, ensure_ascii=False))
    else:
        print(format_view(view, state, args.suggest_capo))
    return 0


if __name__ == "__main__":
    sys.exit(main())
