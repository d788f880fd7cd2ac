import unittest

from bitvector32 import BitVector, InvalidLengthError


class TestBitVectorScenarios(unittest.TestCase):
    def test_new_vector_is_empty(self):
        v = BitVector(40)
        self.assertEqual(v.word_count, 2)
        self.assertEqual(v.words, (0, 0))
        self.assertEqual(v.weight(), 0)

    def test_set_and_weight(self):
        v = BitVector(8)
        v.set(0, True)
        v.set(3, True)
        v.set(7, True)
        self.assertEqual(v.weight(), 3)
        self.assertFalse(v.get(1))

    def test_shift_by_one_word(self):
        v = BitVector(64)
        v.set_value([1, 0])
        v.left_shift(32)
        self.assertEqual(v.words, (0, 1))

    def test_hex_round_trip(self):
        v = BitVector(32)
        v.set_value([0xFFFFFFFF])
        self.assertEqual(v.to_string(16), "ffffffff")

        parsed = BitVector.parse("ffffffff", 16)
        self.assertEqual(parsed.words, (0xFFFFFFFF,))
        self.assertEqual(parsed.length, 32)

    def test_xor(self):
        a = BitVector(16)
        b = BitVector(16)
        a.set_value([0b0000000000001111])
        b.set_value([0b0000000011110000])
        a.xor_op(b)
        self.assertEqual(a.words, (0b0000000011111111,))

    def test_invalid_length(self):
        for length in (-1, 1.5, "8", None, True):
            with self.assertRaises(InvalidLengthError):
                BitVector(length)


if __name__ == "__main__":
    unittest.main()
