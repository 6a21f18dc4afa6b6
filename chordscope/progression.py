"""
Chord progressions: the stored entry shape, and transposition of notes,
chord symbols and whole progressions.

Transposition works on a fixed sharp-spelled table rather than through the
key-aware speller, so results are always sharp-spelled.
"""
import re

from .constants import SHARP_NOTES, FLAT_NOTES, SHARP_DISPLAY
from .pitch import normalize_accidentals

_ROOT_PATTERN = re.compile(r"^([A-G][♯#♭b]?)(.*)$", re.DOTALL)


def _table_index(note):
    clean = normalize_accidentals(note).split("/")[0]
    if clean in SHARP_NOTES:
        return SHARP_NOTES.index(clean)
    if clean in FLAT_NOTES:
        return FLAT_NOTES.index(clean)
    return None


def transpose_note(note, interval):
    """Shift a note name by `interval` semitones; unknown names are returned unchanged."""
    if not isinstance(note, str):
        return note
    idx = _table_index(note)
    if idx is None:
        return note
    return SHARP_DISPLAY[(idx + interval) % 12]


def transpose_chord_symbol(symbol, interval):
    """Transpose only the leading root of a chord symbol ('Am7' + 2 → 'Bm7')."""
    if not isinstance(symbol, str):
        return symbol
    match = _ROOT_PATTERN.match(symbol)
    if not match:
        return symbol
    root, rest = match.groups()
    return transpose_note(root, interval) + rest


def _transpose_fields(chord, interval):
    get = chord.get if isinstance(chord, dict) else lambda name: getattr(chord, name, None)
    changes = {}
    symbol = get("symbol")
    if symbol:
        changes["symbol"] = transpose_chord_symbol(symbol, interval)
    notes = get("notes")
    if notes:
        changes["notes"] = [transpose_note(n, interval) for n in notes]
    root = get("root")
    if root:
        changes["root"] = transpose_note(root, interval)
    return changes


def transpose_progression(progression, interval):
    """
    Return a new progression with every chord shifted by `interval` semitones.

    Items may be dicts or namedtuples (Chord, ChordCandidate); only symbol
    roots, notes and root fields change.
    """
    transposed = []
    for chord in progression:
        changes = _transpose_fields(chord, interval)
        if isinstance(chord, dict):
            transposed.append({**chord, **changes})
        elif hasattr(chord, "_replace"):
            transposed.append(chord._replace(**changes))
        else:
            transposed.append(chord)
    return transposed


def progression_entry(chord):
    """Convert a chord or candidate to the stored {symbol, roman_numeral, notes} shape."""
    if isinstance(chord, dict):
        data = chord
    else:
        data = chord._asdict()
    return {
        "symbol": data.get("symbol"),
        "roman_numeral": data.get("roman_numeral") or "?",
        "notes": list(data.get("notes") or []),
    }
