# ── Pitch-class lookup tables ─────────────────────────────────────────────────

# ASCII spellings used for lookup; Unicode spellings used for display.
SHARP_NOTES: list[str] = [
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"
]
FLAT_NOTES: list[str] = [
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
]
SHARP_DISPLAY: list[str] = [
    "C", "C♯", "D", "D♯", "E", "F", "F♯", "G", "G♯", "A", "A♯", "B"
]
FLAT_DISPLAY: list[str] = [
    "C", "D♭", "D", "E♭", "E", "F", "G♭", "G", "A♭", "A", "B♭", "B"
]
# Dual spellings as shown on the circle of fifths / note pickers.
NOTES: list[str] = [
    "C", "C♯/D♭", "D", "D♯/E♭", "E", "F", "F♯/G♭", "G", "G♯/A♭", "A", "A♯/B♭", "B"
]

# Keys whose scales are spelled with flats (ASCII accidentals).
FLAT_KEYS: frozenset[str] = frozenset({
    "F", "Bb", "Eb", "Ab", "Db", "Gb",
    "Dm", "Gm", "Cm", "Fm", "Bbm", "Ebm", "Abm",
})

MUSICAL_KEYS: list[str] = ["C", "G", "D", "A", "E", "B", "F♯/G♭", "D♭", "A♭", "E♭", "B♭", "F"]
MINOR_KEYS: list[str] = ["Am", "Em", "Bm", "F♯m", "C♯m", "G♯m", "D♯m/E♭m", "B♭m", "Fm", "Cm", "Gm", "Dm"]

# Chromatic interval above a root → scale-degree label
DEGREE_LABELS: list[str] = ["1", "♭2", "2", "♭3", "3", "4", "♭5", "5", "♯5", "6", "♭7", "7"]

A4_FREQUENCY = 440.0
A4_SEMITONE = 9

# ── Scales ────────────────────────────────────────────────────────────────────

SCALE_PATTERNS: dict[str, tuple[int, ...]] = {
    "major":               (0, 2, 4, 5, 7, 9, 11),
    "minor":               (0, 2, 3, 5, 7, 8, 10),
    "harmonicMinor":       (0, 2, 3, 5, 7, 8, 11),
    "melodicMinor":        (0, 2, 3, 5, 7, 9, 11),
    "majorPentatonic":     (0, 2, 4, 7, 9),
    "minorPentatonic":     (0, 3, 5, 7, 10),
    "wholeTone":           (0, 2, 4, 6, 8, 10),
    "halfWholeDiminished": (0, 1, 3, 4, 6, 7, 9, 10),
    "wholeHalfDiminished": (0, 2, 3, 5, 6, 8, 9, 11),
    "dorian":              (0, 2, 3, 5, 7, 9, 10),
    "mixolydian":          (0, 2, 4, 5, 7, 9, 10),
    "lydian":              (0, 2, 4, 6, 7, 9, 11),
    "phrygian":            (0, 1, 3, 5, 7, 8, 10),
    "locrian":             (0, 1, 3, 5, 6, 8, 10),
}

SCALE_DISPLAY_NAMES: dict[str, str] = {
    "major": "Major",
    "minor": "Natural Minor",
    "harmonicMinor": "Harmonic Minor",
    "melodicMinor": "Melodic Minor",
    "majorPentatonic": "Major Pentatonic",
    "minorPentatonic": "Minor Pentatonic",
    "wholeTone": "Whole Tone",
    "halfWholeDiminished": "Half-Whole Diminished",
    "wholeHalfDiminished": "Whole-Half Diminished",
    "dorian": "Dorian",
    "mixolydian": "Mixolydian",
    "lydian": "Lydian",
    "phrygian": "Phrygian",
    "locrian": "Locrian",
}

# ── Roman numerals (indexed by scale degree 0-6) ──────────────────────────────

MAJOR_NUMERALS: list[str] = ["I", "ii", "iii", "IV", "V", "vi", "vii°"]
MINOR_NUMERALS: list[str] = ["i", "ii°", "♭III", "iv", "v", "♭VI", "♭VII"]

# ── Chord recognition scoring ─────────────────────────────────────────────────

EXTRA_NOTE_PENALTY = 0.1
MISSING_NOTE_PENALTY = 0.15
EXACT_MATCH_BONUS = 0.2
MAX_SCORE = 1.0
TIE_TOLERANCE = 0.01
MAX_CANDIDATES = 7
DEFAULT_COMPLETENESS = 0.4

# Preset chord shapes used by the chord builder
PRESET_CHORD_INTERVALS: dict[str, tuple[int, ...]] = {
    "major": (0, 4, 7),
    "minor": (0, 3, 7),
    "dim":   (0, 3, 6),
    "7":     (0, 4, 7, 10),
    "maj7":  (0, 4, 7, 11),
    "m7":    (0, 3, 7, 10),
}
