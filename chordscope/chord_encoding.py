import collections

import numpy as np

from .constants import (
    DEFAULT_COMPLETENESS,
    EXTRA_NOTE_PENALTY,
    MISSING_NOTE_PENALTY,
    EXACT_MATCH_BONUS,
    MAX_SCORE,
    PRESET_CHORD_INTERVALS,
)
from .pitch import note_to_semitone, semitone_to_note

ChordTemplate = collections.namedtuple(
    "ChordTemplate",
    ["name", "intervals", "symbol", "priority", "type",
     "completeness_threshold", "exclude_if", "vector", "exclude_vector"],
)

# name: (intervals, symbol, priority, type, exclude_if)
# Intervals keep their musical order (root, 3rd, 5th, 7th, tension) because
# the candidate's note list is rebuilt from them in that order.
_CATALOG = {
    "power":           ([0, 7],            "5",     0.5, "power",     [3, 4]),
    "major":           ([0, 4, 7],         "",      1,   "triad",     []),
    "minor":           ([0, 3, 7],         "m",     1,   "triad",     []),
    "diminished":      ([0, 3, 6],         "°",     1,   "triad",     []),
    "augmented":       ([0, 4, 8],         "+",     1,   "triad",     []),
    "sus2":            ([0, 2, 7],         "sus2",  1.5, "suspended", [3, 4]),
    "sus4":            ([0, 5, 7],         "sus4",  1.5, "suspended", [3, 4]),
    "6":               ([0, 4, 7, 9],      "6",     2,   "sixth",     []),
    "m6":              ([0, 3, 7, 9],      "m6",    2,   "sixth",     []),
    "add9":            ([0, 4, 7, 2],      "add9",  2,   "added",     [10, 11]),
    "madd9":           ([0, 3, 7, 2],      "madd9", 2,   "added",     [10, 11]),
    "6/9":             ([0, 4, 7, 9, 2],   "6/9",   2.5, "sixth",     []),
    "major7":          ([0, 4, 7, 11],     "maj7",  3,   "seventh",   []),
    "minor7":          ([0, 3, 7, 10],     "m7",    3,   "seventh",   []),
    "dominant7":       ([0, 4, 7, 10],     "7",     3,   "seventh",   []),
    "minorMajor7":     ([0, 3, 7, 11],     "mMaj7", 3,   "seventh",   []),
    "halfDiminished7": ([0, 3, 6, 10],     "m7♭5",  3,   "seventh",   []),
    "diminished7":     ([0, 3, 6, 9],      "°7",    3,   "seventh",   []),
    "augmented7":      ([0, 4, 8, 10],     "7+",    3,   "seventh",   []),
    "9":               ([0, 4, 7, 10, 2],  "9",     4,   "ninth",     []),
    "major9":          ([0, 4, 7, 11, 2],  "maj9",  4,   "ninth",     []),
    "minor9":          ([0, 3, 7, 10, 2],  "m9",    4,   "ninth",     []),
    "7b9":             ([0, 4, 7, 10, 1],  "7♭9",   5,   "altered",   []),
    "7#9":             ([0, 4, 7, 10, 3],  "7♯9",   5,   "altered",   []),
    "7b5":             ([0, 4, 6, 10],     "7♭5",   5,   "altered",   []),
    "7#5":             ([0, 4, 8, 10],     "7♯5",   5,   "altered",   []),
}


def _generate_template_vector(indices):
    """Helper to create a read-only 12-element multi-hot vector from interval indices."""
    v = np.zeros(12, dtype=np.float32)
    for idx in indices:
        v[idx % 12] = 1.0
    v.setflags(write=False)
    return v


def _build_templates():
    templates = []
    for name, (intervals, symbol, priority, kind, exclude_if) in _CATALOG.items():
        templates.append(ChordTemplate(
            name=name,
            intervals=tuple(intervals),
            symbol=symbol,
            priority=priority,
            type=kind,
            completeness_threshold=DEFAULT_COMPLETENESS,
            exclude_if=tuple(exclude_if),
            vector=_generate_template_vector(intervals),
            exclude_vector=_generate_template_vector(exclude_if),
        ))
    return tuple(templates)


# Static catalog, built once at import
CHORD_TEMPLATES = _build_templates()
_TEMPLATES_BY_NAME = {t.name: t for t in CHORD_TEMPLATES}


def get_chord_templates():
    """Return the chord template catalog in declaration order."""
    return CHORD_TEMPLATES


def get_template(name):
    return _TEMPLATES_BY_NAME.get(name)


def encode_intervals(intervals):
    """Encode a collection of intervals (0-11) as a 12-element multi-hot vector."""
    v = np.zeros(12, dtype=np.float32)
    for idx in intervals:
        v[int(idx) % 12] = 1.0
    return v


def score_template(intervals, template) -> float:
    """
    Score how well a set of intervals above a hypothesised root matches a template.

    Returns 0 when an excluded interval is present or when fewer than the
    template's completeness threshold of its intervals are present. Otherwise
    completeness minus penalties for extra and missing notes, plus a bonus
    for an exact match, capped at 1.0.
    """
    input_vec = encode_intervals(intervals)
    n_input = int(input_vec.sum())

    if np.dot(input_vec, template.exclude_vector) > 0:
        return 0.0

    n_required = len(template.intervals)
    match_count = int(np.dot(input_vec, template.vector))
    completeness = match_count / n_required
    if completeness < template.completeness_threshold:
        return 0.0

    extra_notes = n_input - n_required
    missing_notes = n_required - match_count
    extra_penalty = max(0.0, extra_notes * EXTRA_NOTE_PENALTY)
    missing_penalty = missing_notes * MISSING_NOTE_PENALTY
    exact_bonus = EXACT_MATCH_BONUS if completeness == 1.0 and extra_notes == 0 else 0.0

    score = completeness - extra_penalty - missing_penalty + exact_bonus
    return min(MAX_SCORE, max(0.0, score))


def generate_chord_notes(root, chord_type):
    """Spell a preset chord ('major', 'minor', 'dim', '7', 'maj7', 'm7') on root."""
    intervals = PRESET_CHORD_INTERVALS.get(chord_type, PRESET_CHORD_INTERVALS["major"])
    root_pc = note_to_semitone(root)
    return [semitone_to_note(root_pc + i, root) for i in intervals]
