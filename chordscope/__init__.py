"""
chordscope - chord recognition and diatonic harmony for a set of note names.
"""

from .pitch import (
    Key,
    InvalidNoteError,
    parse_note,
    parse_key,
    note_to_semitone,
    semitone_to_note,
    is_flat_key,
    is_valid_note,
    calculate_scale_degree,
    is_note_in_chord,
    is_chord_root,
    is_note_in_scale,
    note_to_frequency,
    chord_frequencies,
)
from .scales import get_scale_names, get_scale_pattern, generate_scale
from .chord_encoding import (
    ChordTemplate,
    CHORD_TEMPLATES,
    get_chord_templates,
    get_template,
    score_template,
    generate_chord_notes,
)
from .recognizer import ChordCandidate, analyze_chord, best_chord
from .diatonic import (
    Chord,
    CHORD_MODES,
    generate_roman_numeral,
    generate_triads,
    generate_sevenths,
    generate_secondary_dominants,
    generate_diminished_passing,
    generate_diatonic_chords,
)
from .nashville import get_nashville_numbers, get_nashville_number_for_chord
from .progression import (
    transpose_note,
    transpose_chord_symbol,
    transpose_progression,
    progression_entry,
)

__all__ = [
    # Pitch model
    "Key",
    "InvalidNoteError",
    "parse_note",
    "parse_key",
    "note_to_semitone",
    "semitone_to_note",
    "is_flat_key",
    "is_valid_note",
    "calculate_scale_degree",
    "is_note_in_chord",
    "is_chord_root",
    "is_note_in_scale",
    "note_to_frequency",
    "chord_frequencies",
    # Scales
    "get_scale_names",
    "get_scale_pattern",
    "generate_scale",
    # Templates
    "ChordTemplate",
    "CHORD_TEMPLATES",
    "get_chord_templates",
    "get_template",
    "score_template",
    "generate_chord_notes",
    # Recognition
    "ChordCandidate",
    "analyze_chord",
    "best_chord",
    # Diatonic harmony
    "Chord",
    "CHORD_MODES",
    "generate_roman_numeral",
    "generate_triads",
    "generate_sevenths",
    "generate_secondary_dominants",
    "generate_diminished_passing",
    "generate_diatonic_chords",
    # Nashville / progressions
    "get_nashville_numbers",
    "get_nashville_number_for_chord",
    "transpose_note",
    "transpose_chord_symbol",
    "transpose_progression",
    "progression_entry",
]
