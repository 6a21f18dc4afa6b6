"""
Pitch model: note-name ↔ pitch-class conversion with key-aware spelling.

Note names may use Unicode (♯, ♭) or ASCII (#, b) accidentals, or a dual
spelling such as "F♯/G♭" (only the part before the slash is read).
"""
import collections

from .constants import (
    SHARP_NOTES,
    FLAT_NOTES,
    SHARP_DISPLAY,
    FLAT_DISPLAY,
    FLAT_KEYS,
    DEGREE_LABELS,
    A4_FREQUENCY,
    A4_SEMITONE,
)
from .logger_config import logger

Key = collections.namedtuple("Key", ["name", "root", "semitone", "is_minor"])


class InvalidNoteError(ValueError):
    """Raised in strict mode when a note name cannot be resolved."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unrecognised note name: {name!r}")


def normalize_accidentals(name: str) -> str:
    """Replace Unicode accidentals with their ASCII equivalents."""
    return name.replace("♯", "#").replace("♭", "b")


def _lookup(clean: str):
    if clean in SHARP_NOTES:
        return SHARP_NOTES.index(clean)
    if clean in FLAT_NOTES:
        return FLAT_NOTES.index(clean)
    return None


def parse_note(name) -> int:
    """Map a note name to its pitch class (0-11), raising InvalidNoteError if unknown."""
    if not isinstance(name, str):
        raise InvalidNoteError(name)
    clean = normalize_accidentals(name.strip())
    pc = _lookup(clean)
    if pc is None and "/" in clean:
        pc = _lookup(clean.split("/")[0])
    if pc is None:
        raise InvalidNoteError(name)
    return pc


def note_to_semitone(name, strict: bool = False) -> int:
    """
    Map a note name (e.g. 'C', 'F#', 'G♭', 'F♯/G♭') to its pitch class (0-11).

    Unrecognised names resolve to 0 (C) unless strict=True, in which case
    InvalidNoteError is raised.
    """
    try:
        return parse_note(name)
    except InvalidNoteError:
        if strict:
            raise
        logger.warning("Unrecognised note name %r, falling back to C", name)
        return 0


def is_valid_note(name) -> bool:
    try:
        parse_note(name)
    except InvalidNoteError:
        return False
    return True


def _key_name(key_context) -> str:
    return normalize_accidentals(str(key_context or "").strip()).split("/")[0]


def is_flat_key(key_context) -> bool:
    """True when the key (e.g. 'F', 'B♭', 'Dm') is spelled with flats."""
    return _key_name(key_context) in FLAT_KEYS


def semitone_to_note(semitone: int, key_context: str = "C") -> str:
    """Spell a pitch class for display, with flats in flat keys and sharps otherwise."""
    table = FLAT_DISPLAY if is_flat_key(key_context) else SHARP_DISPLAY
    return table[int(semitone) % 12]


def parse_key(key, strict: bool = False) -> Key:
    """
    Split a key name into root and mode.

    "Am" → Key("Am", "A", 9, True); "D♯m/E♭m" reads the "D♯m" half.
    """
    name = str(key or "").strip()
    head = name.split("/")[0]
    is_minor = head.endswith("m") and len(head) > 1
    root = head[:-1] if is_minor else head
    return Key(name, root, note_to_semitone(root, strict=strict), is_minor)


def calculate_scale_degree(note, root) -> str:
    """Return the scale-degree label ('1', '♭3', '5', ...) of note above root."""
    if not root:
        return "?"
    interval = (note_to_semitone(note) - note_to_semitone(root)) % 12
    return DEGREE_LABELS[interval]


def _field(obj, name):
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def is_note_in_chord(note, chord) -> bool:
    notes = _field(chord, "notes")
    if not notes:
        return False
    pc = note_to_semitone(note)
    return any(note_to_semitone(n) == pc for n in notes)


def is_chord_root(note, chord) -> bool:
    root = _field(chord, "root")
    if not root:
        return False
    return note_to_semitone(note) == note_to_semitone(root)


def is_note_in_scale(note, scale_notes) -> bool:
    pc = note_to_semitone(note)
    return any(note_to_semitone(n) == pc for n in scale_notes)


def note_to_frequency(note, octave: int = 4) -> float:
    """Equal-tempered frequency in Hz (A4 = 440)."""
    semitones_from_a4 = note_to_semitone(note) - A4_SEMITONE + (octave - 4) * 12
    return A4_FREQUENCY * 2 ** (semitones_from_a4 / 12)


def chord_frequencies(notes, octave: int = 4) -> list[float]:
    return [round(note_to_frequency(n, octave), 2) for n in notes]
