#!/usr/bin/env python3
"""
scripts/audit_templates.py — cross-check the chord template catalog against
music21's own chord analysis.

For every template at every root (12 × catalog size):
  1. Build the template's notes and run analyze_chord on them.
  2. Build the same pitches as a music21 Chord and ask it for its root.
  3. Flag any case where the top-ranked candidate's root disagrees with
     music21, or where the template does not win on its own notes.

Symmetrical chords (augmented, diminished 7th) are expected to disagree on
the root; they are reported but not counted as failures.

Usage (from project root):
    python scripts/audit_templates.py
    python scripts/audit_templates.py --csv reports/template_audit.csv
"""
import os
import sys
import csv
import argparse
from collections import Counter

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

import warnings
warnings.filterwarnings("ignore")

import music21
import music21.chord
import music21.pitch

from chordscope.chord_encoding import get_chord_templates
from chordscope.constants import SHARP_DISPLAY
from chordscope.pitch import note_to_semitone
from chordscope.recognizer import analyze_chord

_SYMMETRICAL = {"augmented", "diminished7"}

RED    = "\033[91m"
YELLOW = "\033[93m"
GREEN  = "\033[92m"
BOLD   = "\033[1m"
RESET  = "\033[0m"


def to_music21_name(note: str) -> str:
    """music21 spells flats with '-' (B♭ → B-)."""
    return note.replace("♯", "#").replace("♭", "-")


def music21_root_pc(notes) -> int:
    c = music21.chord.Chord([music21.pitch.Pitch(to_music21_name(n)) for n in notes])
    return c.root().pitchClass


def audit():
    rows = []
    for template in get_chord_templates():
        for root_pc in range(12):
            root = SHARP_DISPLAY[root_pc]
            notes = [SHARP_DISPLAY[(root_pc + i) % 12] for i in template.intervals]
            candidates = analyze_chord(notes)
            top = candidates[0] if candidates else None
            top_root_pc = note_to_semitone(top.root) if top else None
            m21_pc = music21_root_pc(notes)
            rows.append({
                "template": template.name,
                "root": root,
                "notes": " ".join(notes),
                "top_symbol": top.symbol if top else "",
                "top_template": top.template if top else "",
                "music21_root": SHARP_DISPLAY[m21_pc],
                "root_agrees": top_root_pc == m21_pc,
                "template_wins": bool(top) and top.template == template.name,
            })
    return rows


def main():
    parser = argparse.ArgumentParser(description="Audit chord templates against music21.")
    parser.add_argument("--csv", default=None, help="Write every row to this CSV file")
    args = parser.parse_args()

    rows = audit()
    failures = Counter()
    print(f"\n{BOLD}── Template audit ({len(rows)} chords) ──────────────────────────────{RESET}")
    for row in rows:
        if row["root_agrees"] and row["template_wins"]:
            continue
        expected = row["template"] in _SYMMETRICAL
        colour = YELLOW if expected else RED
        if not expected:
            failures[row["template"]] += 1
        print(f"  {colour}{row['template']:<16}{RESET} {row['notes']:<20} "
              f"top={row['top_symbol']:<12} music21 root={row['music21_root']}")

    if failures:
        print(f"\n{RED}Disagreements by template:{RESET}")
        for name, n in failures.most_common():
            print(f"    {name:<16} {n:>3}")
    else:
        print(f"\n{GREEN}All non-symmetrical templates agree with music21.{RESET}")

    if args.csv:
        os.makedirs(os.path.dirname(os.path.abspath(args.csv)), exist_ok=True)
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print(f"\n[audit] Wrote {len(rows)} rows → {args.csv}")


if __name__ == "__main__":
    main()
