import unittest

from chordscope.diatonic import generate_triads
from chordscope.nashville import get_nashville_number_for_chord, get_nashville_numbers
from chordscope.progression import transpose_note, transpose_progression
from chordscope.scales import generate_scale


class TestNashville(unittest.TestCase):
    def test_numbers_follow_scale_length(self):
        self.assertEqual(get_nashville_numbers("C", "major"), ["1", "2", "3", "4", "5", "6", "7"])
        self.assertEqual(get_nashville_numbers("G", "majorPentatonic"), ["1", "2", "3", "4", "5"])
        self.assertEqual(get_nashville_numbers("C", "bogus"), [])

    def test_number_for_chord_root(self):
        scale = generate_scale("C", "major")
        self.assertEqual(get_nashville_number_for_chord(scale, "C"), "1")
        self.assertEqual(get_nashville_number_for_chord(scale, "F"), "4")
        self.assertEqual(get_nashville_number_for_chord(scale, "B"), "7")

    def test_accidentals_are_ignored(self):
        f_major = generate_scale("F", "major")
        self.assertEqual(get_nashville_number_for_chord(f_major, "Bb"), "4")
        self.assertEqual(get_nashville_number_for_chord(f_major, "B♭"), "4")
        # letter-name match: F♯ sits on the F degree of C major
        self.assertEqual(get_nashville_number_for_chord(generate_scale("C", "major"), "F♯"), "4")

    def test_numbers_survive_transposition(self):
        scale = generate_scale("C", "major")
        chords = transpose_progression(generate_triads(scale, "C"), 2)
        moved = [transpose_note(n, 2) for n in scale]
        self.assertEqual(
            [get_nashville_number_for_chord(moved, c.root) for c in chords],
            ["1", "2", "3", "4", "5", "6", "7"],
        )

    def test_unknown_root(self):
        self.assertEqual(get_nashville_number_for_chord(["C", "D", "E"], "H"), "?")
        self.assertEqual(get_nashville_number_for_chord([], "C"), "?")


if __name__ == "__main__":
    unittest.main()
