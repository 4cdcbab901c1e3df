import sys

from chord_transposer import (
    capo_shapes_text,
    detect_hotspots,
    find_voicings_for,
    suggest_capos_for_target_key,
    transpose_chart,
)

text = """[Verse]
G       D       Em      C
Hello   there   old     friend
"""
sounding = transpose_chart(text, "G", "Bb")
sys.stdout.write(sounding)

# Best capo position for the new key
best = suggest_capos_for_target_key("Bb")[0]
sys.stdout.write(f"capo {best.capo_fret}: play {best.shapes_key} shapes ({best.reason})\n")
sys.stdout.write(capo_shapes_text(sounding, "Bb", best.capo_fret))

# Where the chords sit, with a fingering for each
for hotspot in detect_hotspots(sounding):
    shapes = find_voicings_for(hotspot.chord)
    fingering = shapes[0].fret_string() if shapes else "-"
    sys.stdout.write(f"line {hotspot.line} col {hotspot.col}: {hotspot.chord} {fingering}\n")
