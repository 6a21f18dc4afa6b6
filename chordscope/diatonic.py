"""
Diatonic chord generation for a key: triads, seventh chords, secondary
dominants and diminished passing chords, each labelled with a Roman numeral.

The triad/seventh builders stack thirds by scale index (degree i takes
scale[i], scale[i+2], scale[i+4], ...), so they assume a seven-note scale.
Chord quality is measured from the actual semitone intervals of the members.
"""
import collections

from .constants import MAJOR_NUMERALS, MINOR_NUMERALS
from .pitch import note_to_semitone, semitone_to_note, parse_key
from .scales import generate_scale

Chord = collections.namedtuple(
    "Chord",
    ["symbol", "notes", "root", "roman_numeral", "scale_degree", "degrees", "target"],
    defaults=(None,),
)

CHORD_MODES = ("triads", "sevenths", "secondary", "diminished")


def _interval(root, note):
    return (note_to_semitone(note) - note_to_semitone(root)) % 12


def determine_triad_symbol(root, third, fifth) -> str:
    third_interval = _interval(root, third)
    fifth_interval = _interval(root, fifth)

    if third_interval == 4 and fifth_interval == 7:
        return root
    elif third_interval == 3 and fifth_interval == 7:
        return root + "m"
    elif third_interval == 3 and fifth_interval == 6:
        return root + "°"
    elif third_interval == 4 and fifth_interval == 8:
        return root + "+"
    return root  # fallback


def determine_seventh_symbol(root, third, fifth, seventh) -> str:
    base = determine_triad_symbol(root, third, fifth)
    seventh_interval = _interval(root, seventh)

    if seventh_interval == 11:
        if base == root:
            return root + "maj7"
        if base == root + "m":
            return root + "mMaj7"
    elif seventh_interval == 10:
        if base == root:
            return root + "7"
        if base == root + "m":
            return root + "m7"
        if base == root + "°":
            return root + "m7♭5"
    elif seventh_interval == 9:
        return root + "°7"
    return base + "7"


def generate_roman_numeral(degree, mode, key_root) -> str:
    """
    Roman numeral for a scale degree (0-6) from the fixed major/minor tables.

    The minor table is used when mode is 'minor' or key_root names a minor
    key ('Am'). Out-of-range degrees fall back to the tonic numeral.
    """
    is_minor = mode == "minor" or parse_key(key_root).is_minor
    numerals = MINOR_NUMERALS if is_minor else MAJOR_NUMERALS
    if isinstance(degree, int) and 0 <= degree < len(numerals):
        return numerals[degree]
    return numerals[0]


def generate_triads(scale_notes, key_root) -> list[Chord]:
    n = len(scale_notes)
    if n == 0:
        return []
    triads = []
    for index, note in enumerate(scale_notes):
        third = scale_notes[(index + 2) % n]
        fifth = scale_notes[(index + 4) % n]
        triads.append(Chord(
            symbol=determine_triad_symbol(note, third, fifth),
            notes=[note, third, fifth],
            root=note,
            roman_numeral=generate_roman_numeral(index, "major", key_root),
            scale_degree=index + 1,
            degrees=["1", "3", "5"],
        ))
    return triads


def generate_sevenths(scale_notes, key_root) -> list[Chord]:
    n = len(scale_notes)
    if n == 0:
        return []
    sevenths = []
    for index, note in enumerate(scale_notes):
        third = scale_notes[(index + 2) % n]
        fifth = scale_notes[(index + 4) % n]
        seventh = scale_notes[(index + 6) % n]
        sevenths.append(Chord(
            symbol=determine_seventh_symbol(note, third, fifth, seventh),
            notes=[note, third, fifth, seventh],
            root=note,
            roman_numeral=generate_roman_numeral(index, "major", key_root) + "7",
            scale_degree=index + 1,
            degrees=["1", "3", "5", "7"],
        ))
    return sevenths


def _chord_on(root_pc, intervals, key_root):
    return [semitone_to_note(root_pc + i, key_root) for i in intervals]


def generate_secondary_dominants(key_root, scale_notes) -> list[Chord]:
    """V7 of every non-tonic degree: a dominant seventh a perfect fifth above it."""
    secondaries = []
    for index, target in enumerate(scale_notes):
        if index == 0:
            continue
        notes = _chord_on(note_to_semitone(target) + 7, (0, 4, 7, 10), key_root)
        target_roman = generate_roman_numeral(index, "major", key_root)
        secondaries.append(Chord(
            symbol=notes[0] + "7",
            notes=notes,
            root=notes[0],
            roman_numeral=f"V7/{target_roman}",
            scale_degree=index + 1,
            degrees=["1", "3", "5", "♭7"],
            target=target,
        ))
    return secondaries


def generate_diminished_passing(key_root, scale_notes) -> list[Chord]:
    """vii°7 of every non-tonic degree: a diminished seventh a semitone below it."""
    passing = []
    for index, target in enumerate(scale_notes):
        if index == 0:
            continue
        notes = _chord_on(note_to_semitone(target) - 1, (0, 3, 6, 9), key_root)
        target_roman = generate_roman_numeral(index, "major", key_root)
        passing.append(Chord(
            symbol=notes[0] + "°7",
            notes=notes,
            root=notes[0],
            roman_numeral=f"vii°7/{target_roman}",
            scale_degree=index + 1,
            degrees=["1", "♭3", "♭5", "♭♭7"],
            target=target,
        ))
    return passing


def generate_diatonic_chords(key, scale_type="major", mode="triads") -> list[Chord]:
    """Build the chords shown for a key in one of CHORD_MODES; unknown modes yield []."""
    scale_notes = generate_scale(key, scale_type)
    if mode == "triads":
        return generate_triads(scale_notes, key)
    if mode == "sevenths":
        return generate_sevenths(scale_notes, key)
    if mode == "secondary":
        return generate_secondary_dominants(key, scale_notes)
    if mode == "diminished":
        return generate_diminished_passing(key, scale_notes)
    return []
