import unittest

from chordscope.constants import SCALE_PATTERNS
from chordscope.pitch import note_to_semitone, semitone_to_note, parse_key
from chordscope.scales import generate_scale, get_scale_names, get_scale_pattern


class TestGenerateScale(unittest.TestCase):
    def test_c_major(self):
        self.assertEqual(generate_scale("C", "major"), ["C", "D", "E", "F", "G", "A", "B"])

    def test_flat_and_sharp_keys(self):
        self.assertEqual(generate_scale("F", "major"), ["F", "G", "A", "B♭", "C", "D", "E"])
        self.assertEqual(generate_scale("G", "major"), ["G", "A", "B", "C", "D", "E", "F♯"])
        self.assertEqual(generate_scale("Bb", "major")[0], "B♭")

    def test_minor_key_names_are_accepted_as_root(self):
        self.assertEqual(generate_scale("Am", "minor"), ["A", "B", "C", "D", "E", "F", "G"])
        self.assertEqual(generate_scale("Dm", "minor"), ["D", "E", "F", "G", "A", "B♭", "C"])

    def test_harmonic_minor(self):
        self.assertEqual(
            generate_scale("A", "harmonicMinor"), ["A", "B", "C", "D", "E", "F", "G♯"]
        )

    def test_unknown_scale_type_is_empty(self):
        self.assertEqual(generate_scale("C", "bogus"), [])
        self.assertEqual(generate_scale("C", None), [])

    def test_length_and_first_note_for_every_pattern(self):
        for root in ["C", "E♭", "F#", "Am"]:
            root_pc = parse_key(root).semitone
            for name, pattern in SCALE_PATTERNS.items():
                scale = generate_scale(root, name)
                self.assertEqual(len(scale), len(pattern))
                self.assertEqual(scale[0], semitone_to_note(root_pc, root))
                pcs = [(note_to_semitone(n) - root_pc) % 12 for n in scale]
                self.assertEqual(pcs, list(pattern))


class TestScalePatterns(unittest.TestCase):
    def test_patterns_are_well_formed(self):
        for name, pattern in SCALE_PATTERNS.items():
            self.assertEqual(pattern[0], 0, name)
            self.assertEqual(list(pattern), sorted(set(pattern)), name)
            self.assertTrue(all(0 <= i <= 11 for i in pattern), name)

    def test_scale_names(self):
        names = get_scale_names()
        self.assertEqual(names[0], "major")
        self.assertEqual(len(names), len(SCALE_PATTERNS))
        self.assertEqual(get_scale_pattern("major"), (0, 2, 4, 5, 7, 9, 11))
        self.assertIsNone(get_scale_pattern("bogus"))


if __name__ == "__main__":
    unittest.main()
