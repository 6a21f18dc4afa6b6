"""Nashville Number System: scale degrees as numbers 1-7."""
import re

from .scales import generate_scale

_ACCIDENTALS = re.compile(r"[♯#♭b]")


def _strip_accidentals(note: str) -> str:
    return _ACCIDENTALS.sub("", note)


def get_nashville_numbers(key, scale_type) -> list[str]:
    """e.g. ['1', '2', '3', '4', '5', '6', '7'] for a heptatonic scale."""
    return [str(i + 1) for i in range(len(generate_scale(key, scale_type)))]


def get_nashville_number_for_chord(scale, chord_root) -> str:
    """
    Nashville number of a chord root within a scale, matched by letter name
    with accidentals stripped; '?' if the letter is not in the scale.

    scale = ['C','D','E','F','G','A','B'], chord_root = 'F' → '4'
    """
    letter = _strip_accidentals(chord_root)
    for idx, note in enumerate(scale):
        if _strip_accidentals(note) == letter:
            return str(idx + 1)
    return "?"
