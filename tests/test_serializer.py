import unittest

from game import Board, Disk, FormatError, GameState, Player, decode, encode


class TestSerializer(unittest.TestCase):
    def test_given_opening_when_encoding_then_header_and_rows(self):
        text = encode(GameState.new_game())
        lines = text.split("\n")
        self.assertEqual(lines[0], "x00")
        self.assertEqual(len(lines), 9)
        self.assertEqual(lines[4], "---ox---")
        self.assertEqual(lines[5], "---xo---")
        self.assertEqual(lines[1], "--------")
        self.assertFalse(text.endswith("\n"))

    def test_given_documented_example_when_decoding_then_cells_match(self):
        s = decode("x00\n-x-\nxox\n-o-")
        self.assertIs(s.turn, Disk.DARK)
        self.assertEqual((s.player1, s.player2), (Player.MANUAL, Player.MANUAL))
        self.assertEqual(s.board.rows, (
            (None, Disk.DARK, None),
            (Disk.DARK, Disk.LIGHT, Disk.DARK),
            (None, Disk.LIGHT, None),
        ))

    def test_given_empty_3x3_when_decoding_then_all_cells_empty(self):
        s = decode("x00\n---\n---\n---")
        self.assertIs(s.turn, Disk.DARK)
        self.assertEqual(s.player1, Player.MANUAL)
        self.assertEqual(s.player2, Player.MANUAL)
        self.assertTrue(s.board.has_shape(3, 3))
        self.assertEqual(s.board.count_disks(Disk.DARK) + s.board.count_disks(Disk.LIGHT), 0)

    def test_given_ragged_rows_when_decoding_then_accepted_without_shape_check(self):
        s = decode("x00\n---\n--")
        self.assertEqual([len(r) for r in s.board.rows], [3, 2])
        self.assertFalse(s.board.has_shape(3, 2))

    def test_given_no_turn_and_automatic_modes_when_decoding_then_fields_set(self):
        s = decode("-10\nxo")
        self.assertIsNone(s.turn)
        self.assertEqual(s.player1, Player.AUTOMATIC)
        self.assertEqual(s.player2, Player.MANUAL)

    def test_given_trailing_newline_when_decoding_then_ignored(self):
        self.assertEqual(decode("o01\nxo\n"), decode("o01\nxo"))

    def test_given_malformed_text_when_decoding_then_format_error(self):
        for bad in ["", "\n", "x0", "x0a", "x02", "x0-", "z00", "x00\n-q-", "X00\n---"]:
            with self.subTest(text=bad):
                with self.assertRaises(FormatError):
                    decode(bad)

    def test_given_format_error_when_caught_as_value_error_then_compatible(self):
        with self.assertRaises(ValueError):
            decode("x")

    def test_given_states_when_roundtrip_then_equal(self):
        states = [
            GameState.new_game(),
            GameState.new_game(6, 4, Player.AUTOMATIC, Player.MANUAL).with_turn(Disk.LIGHT),
            GameState(turn=None, player1=Player.MANUAL, player2=Player.AUTOMATIC,
                      board=Board.from_rows([[Disk.DARK, None], [Disk.LIGHT, Disk.LIGHT]])),
        ]
        for s in states:
            with self.subTest(state=encode(s)):
                self.assertEqual(decode(encode(s)), s)


if __name__ == '__main__':
    unittest.main(verbosity=2)
