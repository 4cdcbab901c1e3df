#!/usr/bin/env python3
"""Export the chords found in a chart, with their positions, as JSON.

Usage:
    python examples/chord_hotspots.py <input_file> [-o output.json] [--pretty]

Examples:
    python examples/chord_hotspots.py song.txt
    python examples/chord_hotspots.py song.txt -o chords.json --pretty
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from chord_transposer import detect_hotspots, find_voicings_for
from chord_transposer.chart import Hotspot


def hotspot_to_dict(hotspot: Hotspot) -> dict[str, Any]:
    """Convert a Hotspot to a JSON-serializable dict."""
    result: dict[str, Any] = {
        "text": hotspot.chord,
        "line": hotspot.line,
        "col": hotspot.col,
        "length": hotspot.length,
    }
    chord = hotspot.token.chord
    if chord is not None:
        result["chord"] = {
            "root": chord.root,
            "quality": chord.quality,
            "bass": chord.bass,
            "symbol": chord.symbol,
            "tones": list(chord.tones),
        }
    shapes = find_voicings_for(hotspot.chord)
    result["fingerings"] = [s.fret_string() for s in shapes]
    return result


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Locate chords in a chart and export them to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s song.txt
  %(prog)s song.txt -o chords.json --pretty
        """,
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Chart file to scan",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output JSON file (default: stdout)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )

    args = parser.parse_args()

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    text = args.input.read_text(encoding="utf-8")
    data = {"chords": [hotspot_to_dict(h) for h in detect_hotspots(text)]}

    indent = 2 if args.pretty else None
    output = json.dumps(data, indent=indent, ensure_ascii=False)

    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        print(f"Wrote {len(data['chords'])} chords to {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
