import unittest

from application.services.similarity import cosine_similarity
from domain.entities import WeightedTermVector
from domain.errors import VectorLengthMismatchError


class TestCosineSimilarity(unittest.TestCase):
    def test_self_similarity_is_one(self):
        vector = WeightedTermVector.from_values([0.5, 1.5, 2.0])
        self.assertAlmostEqual(cosine_similarity(vector, vector), 1.0)

    def test_zero_vector_scores_zero(self):
        zero = WeightedTermVector.from_values([0.0, 0.0])
        self.assertEqual(cosine_similarity(zero, zero), 0.0)
        self.assertEqual(cosine_similarity(zero, [1.0, 2.0]), 0.0)

    def test_empty_vectors_score_zero(self):
        self.assertEqual(cosine_similarity([], []), 0.0)

    def test_orthogonal_vectors_score_zero(self):
        self.assertEqual(cosine_similarity([1.0, 0.0], [0.0, 3.0]), 0.0)

    def test_shorter_vector_is_zero_padded(self):
        short = [1.0, 1.0]
        long = [1.0, 1.0, 0.0]
        self.assertAlmostEqual(cosine_similarity(short, long), 1.0)
        self.assertAlmostEqual(cosine_similarity([1.0], [1.0, 1.0]), 2 ** -0.5)

    def test_symmetric_with_mismatched_lengths(self):
        a = WeightedTermVector.from_values([0.3, 1.2])
        b = WeightedTermVector.from_values([0.9, 0.1, 2.4, 0.7])
        self.assertEqual(cosine_similarity(a, b), cosine_similarity(b, a))

    def test_strict_mode_rejects_length_drift(self):
        a = WeightedTermVector.from_values([1.0])
        b = WeightedTermVector.from_values([1.0, 0.0])
        with self.assertRaises(VectorLengthMismatchError):
            cosine_similarity(a, b, strict=True)

    def test_strict_mode_accepts_equal_sizes(self):
        a = WeightedTermVector.from_values([1.0, 2.0])
        b = WeightedTermVector.from_values([2.0, 4.0])
        self.assertAlmostEqual(cosine_similarity(a, b, strict=True), 1.0)


class TestWeightedTermVector(unittest.TestCase):
    def test_tag_must_match_length(self):
        with self.assertRaises(ValueError):
            WeightedTermVector(values=(1.0,), corpus_size=2)

    def test_padded(self):
        vector = WeightedTermVector.from_values([1.0, 2.0])
        self.assertEqual(vector.padded(4), (1.0, 2.0, 0.0, 0.0))
        self.assertEqual(vector.padded(1), (1.0, 2.0))


if __name__ == "__main__":
    unittest.main()
