"""Scale generation from a root and a named interval pattern."""
from .constants import SCALE_PATTERNS
from .pitch import parse_key, semitone_to_note


def get_scale_names() -> list[str]:
    """Return list of available scale names."""
    return list(SCALE_PATTERNS.keys())


def get_scale_pattern(scale_type):
    """Return the interval pattern for a scale, or None if unknown."""
    return SCALE_PATTERNS.get(scale_type)


def generate_scale(root, scale_type) -> list[str]:
    """
    Spell the notes of a scale, e.g. generate_scale('F', 'major') →
    ['F', 'G', 'A', 'B♭', 'C', 'D', 'E'].

    The root may be a key name ('Am', 'F♯/G♭'); it is also the spelling
    context. An unknown scale type yields an empty list.
    """
    pattern = get_scale_pattern(scale_type)
    if not pattern:
        return []
    key = parse_key(root)
    return [semitone_to_note(key.semitone + interval, root) for interval in pattern]
