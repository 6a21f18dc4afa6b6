#!/usr/bin/env python3
"""
scripts/analyze_notes.py — identify the chord(s) a set of notes could be.

The first note is treated as the bass note, so an inversion is labelled
with a slash (E G C → C/E).

Usage (from project root):
    python scripts/analyze_notes.py C E G
    python scripts/analyze_notes.py E G C --root C
    python scripts/analyze_notes.py C E X --strict   # fail on unknown names
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from chordscope.pitch import InvalidNoteError
from chordscope.recognizer import analyze_chord

# ── ANSI colours ────────────────────────────────────────────────────────────
GREEN  = "\033[92m"
YELLOW = "\033[93m"
DIM    = "\033[2m"
BOLD   = "\033[1m"
RESET  = "\033[0m"


def _colour_for(score: float) -> str:
    if score >= 0.9:
        return GREEN
    if score >= 0.5:
        return YELLOW
    return DIM


def print_candidates(notes, candidates) -> None:
    print(f"\n{BOLD}Notes:{RESET} {' '.join(notes)}  (bass: {notes[0]})")
    if not candidates:
        print("  No chord matches found.\n")
        return
    print(f"  {'#':>2}  {'Symbol':<12} {'Score':>5}  {'Type':<10} Notes")
    print(f"  {'─'*2}  {'─'*12} {'─'*5}  {'─'*10} {'─'*16}")
    for rank, c in enumerate(candidates, 1):
        colour = _colour_for(c.score)
        inv = " (inv)" if c.is_inversion else ""
        print(f"  {rank:>2}  {colour}{c.symbol:<12}{RESET} {c.score:>5.2f}  "
              f"{c.type:<10} {' '.join(c.notes)}{inv}")
    print()


def main():
    parser = argparse.ArgumentParser(description="Identify chords from note names.")
    parser.add_argument("notes", nargs="+", help="Note names, bass note first (e.g. E G C)")
    parser.add_argument("--root", default=None, help="Force the chord root")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on unrecognised note names instead of reading them as C")
    args = parser.parse_args()

    try:
        candidates = analyze_chord(args.notes, forced_root=args.root, strict=args.strict)
    except InvalidNoteError as e:
        print(f"[analyze] Error: {e}")
        sys.exit(1)

    print_candidates(args.notes, candidates)


if __name__ == "__main__":
    main()
