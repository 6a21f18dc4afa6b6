import unittest
import numpy as np
from chordscope.chord_encoding import (
    encode_intervals,
    generate_chord_notes,
    get_chord_templates,
    get_template,
    score_template,
)


class TestChordTemplates(unittest.TestCase):
    def test_get_chord_templates_structure(self):
        templates = get_chord_templates()
        self.assertEqual(len(templates), 26)

        for template in templates:
            self.assertIsInstance(template.name, str)
            self.assertIsInstance(template.symbol, str)
            self.assertEqual(template.intervals[0], 0)
            self.assertEqual(template.completeness_threshold, 0.4)
            self.assertIsInstance(template.vector, np.ndarray)
            self.assertEqual(template.vector.shape, (12,))
            self.assertEqual(template.vector.dtype, np.float32)
            self.assertEqual(int(template.vector.sum()), len(template.intervals))

    def test_template_vectors_are_read_only(self):
        template = get_template("major")
        with self.assertRaises(ValueError):
            template.vector[1] = 1.0

    def test_template_vector_values(self):
        expected = np.zeros(12, dtype=np.float32)
        expected[[0, 4, 7]] = 1.0
        np.testing.assert_array_equal(get_template("major").vector, expected)

        # add9 lists its 9th last but lands on index 2
        expected = np.zeros(12, dtype=np.float32)
        expected[[0, 2, 4, 7]] = 1.0
        np.testing.assert_array_equal(get_template("add9").vector, expected)
        self.assertEqual(get_template("add9").intervals, (0, 4, 7, 2))

    def test_exclusions(self):
        self.assertEqual(get_template("power").exclude_if, (3, 4))
        self.assertEqual(get_template("sus4").exclude_if, (3, 4))
        self.assertEqual(get_template("add9").exclude_if, (10, 11))
        self.assertEqual(get_template("major").exclude_if, ())
        self.assertIsNone(get_template("bogus"))

    def test_encode_intervals(self):
        expected = np.zeros(12, dtype=np.float32)
        expected[[0, 4, 7]] = 1.0
        np.testing.assert_array_equal(encode_intervals([0, 4, 7, 12]), expected)


class TestScoreTemplate(unittest.TestCase):
    def test_exact_match_scores_one(self):
        self.assertEqual(score_template([0, 4, 7], get_template("major")), 1.0)
        self.assertEqual(score_template([0, 7], get_template("power")), 1.0)

    def test_missing_note_penalty(self):
        # 3 of 4 present: 0.75 - 0.15
        self.assertAlmostEqual(score_template([0, 4, 7], get_template("major7")), 0.6)
        # 2 of 3 present: 0.667 - 0.15
        self.assertAlmostEqual(score_template([0, 7], get_template("major")), 2 / 3 - 0.15)

    def test_extra_note_penalty(self):
        self.assertAlmostEqual(score_template([0, 4, 7, 11], get_template("major")), 0.9)

    def test_excluded_interval_disqualifies(self):
        self.assertEqual(score_template([0, 4, 7], get_template("power")), 0.0)
        self.assertEqual(score_template([0, 3, 5, 7], get_template("sus4")), 0.0)
        self.assertEqual(score_template([0, 2, 4, 7, 10], get_template("add9")), 0.0)

    def test_below_completeness_threshold(self):
        self.assertEqual(score_template([0, 1], get_template("major")), 0.0)

    def test_score_never_negative(self):
        chromatic = list(range(12))
        for template in get_chord_templates():
            self.assertGreaterEqual(score_template(chromatic, template), 0.0)


class TestGenerateChordNotes(unittest.TestCase):
    def test_presets(self):
        self.assertEqual(generate_chord_notes("C", "major"), ["C", "E", "G"])
        self.assertEqual(generate_chord_notes("D", "m7"), ["D", "F", "A", "C"])
        self.assertEqual(generate_chord_notes("F", "7"), ["F", "A", "C", "E♭"])
        self.assertEqual(generate_chord_notes("B", "dim"), ["B", "D", "F"])

    def test_unknown_type_falls_back_to_major(self):
        self.assertEqual(generate_chord_notes("G", "bogus"), ["G", "B", "D"])


if __name__ == "__main__":
    unittest.main()
