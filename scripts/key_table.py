#!/usr/bin/env python3
"""
scripts/key_table.py — print the diatonic chords of a key.

    [Degree]  [Roman]  [Symbol]  [Notes]  (Nashville)

Usage (from project root):
    python scripts/key_table.py C
    python scripts/key_table.py Am --scale minor --mode sevenths
    python scripts/key_table.py G --mode secondary --nashville
    python scripts/key_table.py D --transpose 2
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from chordscope.constants import SCALE_DISPLAY_NAMES
from chordscope.diatonic import CHORD_MODES, generate_diatonic_chords
from chordscope.nashville import get_nashville_number_for_chord
from chordscope.pitch import InvalidNoteError, parse_key
from chordscope.progression import transpose_note, transpose_progression
from chordscope.scales import generate_scale, get_scale_names

# ── ANSI colours ──────────────────────────────────────────────────────────────
BOLD  = "\033[1m"
CYAN  = "\033[96m"
DIM   = "\033[2m"
RESET = "\033[0m"


def main():
    parser = argparse.ArgumentParser(description="Print the diatonic chords of a key.")
    parser.add_argument("key", help="Key name, e.g. C, F#, Bb, Am")
    parser.add_argument("--scale", default=None, choices=get_scale_names(),
                        help="Scale type (default: major, or minor for minor keys)")
    parser.add_argument("--mode", default="triads", choices=CHORD_MODES)
    parser.add_argument("--nashville", action="store_true", help="Show Nashville numbers")
    parser.add_argument("--transpose", type=int, default=0, help="Transpose by N semitones")
    args = parser.parse_args()

    try:
        key = parse_key(args.key, strict=True)
    except InvalidNoteError as e:
        print(f"[key_table] Error: {e}")
        sys.exit(1)

    scale_type = args.scale or ("minor" if key.is_minor else "major")
    scale = generate_scale(args.key, scale_type)
    chords = generate_diatonic_chords(args.key, scale_type, args.mode)
    if args.transpose:
        chords = transpose_progression(chords, args.transpose)
        # Nashville numbers follow the chords into the new key
        scale = [transpose_note(n, args.transpose) for n in scale]

    print(f"\n{BOLD}{args.key} {SCALE_DISPLAY_NAMES.get(scale_type, scale_type)}{RESET}"
          f"  ({args.mode})")
    print(f"{DIM}Scale: {' '.join(scale)}{RESET}")
    if args.transpose:
        print(f"{DIM}Transposed by {args.transpose:+d} semitones{RESET}")
    print()

    for chord in chords:
        line = (f"  {chord.scale_degree:>2}  {chord.roman_numeral:<10} "
                f"{CYAN}{chord.symbol:<10}{RESET} {' '.join(chord.notes)}")
        if args.nashville:
            line += f"  {DIM}({get_nashville_number_for_chord(scale, chord.root)}){RESET}"
        print(line)
    if not chords:
        print("  (no chords)")
    print()


if __name__ == "__main__":
    main()
