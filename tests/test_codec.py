import unittest

from brainf.codec import CharacterCodec, InputCursor, IOMode, NumericCodec, codec_for
from brainf.errors import InputInvalid, InputLimitExceeded, InputRequired
from brainf.tape import INT32_MAX, INT32_MIN


class IOModeTests(unittest.TestCase):
    def test_parse_aliases(self) -> None:
        self.assertIs(IOMode.parse("char"), IOMode.CHARACTER)
        self.assertIs(IOMode.parse(" ASCII "), IOMode.CHARACTER)
        self.assertIs(IOMode.parse("Numeric"), IOMode.NUMERIC)
        with self.assertRaises(ValueError):
            IOMode.parse("hex")

    def test_codec_for_mode(self) -> None:
        self.assertIsInstance(codec_for(IOMode.CHARACTER), CharacterCodec)
        codec = codec_for(IOMode.NUMERIC, -5, 5)
        self.assertIsInstance(codec, NumericCodec)
        self.assertEqual((codec.cell_min, codec.cell_max), (-5, 5))


class CharacterCodecTests(unittest.TestCase):
    def setUp(self) -> None:
        self.codec = CharacterCodec()

    def test_encode_uses_code_points(self) -> None:
        self.assertEqual(self.codec.encode(65), "A")
        self.assertEqual(self.codec.encode(0x1F600), "\U0001F600")

    def test_encode_wraps_out_of_range_values(self) -> None:
        self.assertEqual(self.codec.encode(0x110000 + 66), "B")
        self.assertEqual(self.codec.encode(-1), "\U0010FFFF")

    def test_astral_character_round_trip(self) -> None:
        value = self.codec.decode("\U0001F600", 0)
        self.assertEqual(value, 0x1F600)
        self.assertEqual(self.codec.encode(value), "\U0001F600")

    def test_decode_reads_character_at_index(self) -> None:
        self.assertEqual(self.codec.decode("AB", 0), 65)
        self.assertEqual(self.codec.decode("AB", 1), 66)
        self.assertEqual(self.codec.decode("é", 0), 0xE9)

    def test_decode_requires_input(self) -> None:
        with self.assertRaises(InputRequired):
            self.codec.decode("", 0)

    def test_decode_past_end_is_invalid(self) -> None:
        with self.assertRaises(InputInvalid):
            self.codec.decode("A", 1)


class NumericCodecTests(unittest.TestCase):
    def setUp(self) -> None:
        self.codec = NumericCodec()

    def test_encode_appends_separator(self) -> None:
        self.assertEqual(self.codec.encode(-5), "-5, ")
        self.assertEqual(self.codec.encode(0), "0, ")

    def test_single_number_is_read_by_every_operation(self) -> None:
        self.assertEqual(self.codec.decode(" 4 2\n", 0), 42)
        self.assertEqual(self.codec.decode("42", 7), 42)
        self.assertEqual(self.codec.decode("-7", 0), -7)
        self.assertEqual(self.codec.decode("+7", 0), 7)

    def test_comma_list_is_consumed_by_index(self) -> None:
        text = "1, 2 ,3"
        self.assertEqual([self.codec.decode(text, i) for i in range(3)], [1, 2, 3])

    def test_comma_list_never_parsed_as_single_number(self) -> None:
        self.assertEqual(self.codec.decode("3,4", 0), 3)
        self.assertEqual(self.codec.decode("3,4", 1), 4)
        self.assertEqual(self.codec.decode("12,", 0), 12)

    def test_comma_list_errors(self) -> None:
        with self.assertRaises(InputInvalid):
            self.codec.decode("1,2", 2)
        with self.assertRaises(InputInvalid):
            self.codec.decode("1,x", 1)
        with self.assertRaises(InputInvalid):
            self.codec.decode("1,,2", 1)

    def test_invalid_single_numbers(self) -> None:
        for text in ["abc", "1_000", "4.5", "   ", "١"]:
            with self.subTest(text=text):
                with self.assertRaises(InputInvalid):
                    self.codec.decode(text, 0)

    def test_range_is_thirty_two_bit(self) -> None:
        self.assertEqual(self.codec.decode(str(INT32_MAX), 0), INT32_MAX)
        self.assertEqual(self.codec.decode(str(INT32_MIN), 0), INT32_MIN)
        with self.assertRaises(InputInvalid):
            self.codec.decode(str(INT32_MAX + 1), 0)

    def test_decode_requires_input(self) -> None:
        with self.assertRaises(InputRequired):
            self.codec.decode("", 0)


class InputCursorTests(unittest.TestCase):
    def test_limit_is_hit_by_last_allowed_read(self) -> None:
        cursor = InputCursor(limit=3)
        cursor.consume()
        cursor.consume()
        self.assertEqual(cursor.index, 2)
        with self.assertRaises(InputLimitExceeded):
            cursor.consume()
        self.assertEqual(cursor.consumed, 3)

    def test_rejects_non_positive_limit(self) -> None:
        with self.assertRaises(ValueError):
            InputCursor(limit=0)


if __name__ == "__main__":
    unittest.main()
