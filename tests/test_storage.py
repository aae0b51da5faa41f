import os
import tempfile
import unittest

from game import (
    DimensionMismatchError,
    Disk,
    FinishedGameError,
    FormatError,
    GameState,
    PersistenceError,
    Player,
    apply_move,
    encode,
    load_game,
    load_or_new_game,
    read_game,
    save_game,
)


class TestStorage(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = self._tmp.name
        self.path = os.path.join(self.dir, "save.txt")

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, text):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)

    def test_given_state_when_saved_then_file_holds_encoding_and_reads_back(self):
        s = apply_move(GameState.new_game(player2=Player.AUTOMATIC), Disk.DARK, 3, 2).state
        save_game(self.path, s)
        with open(self.path, encoding="utf-8") as f:
            self.assertEqual(f.read(), encode(s))
        self.assertEqual(read_game(self.path), s)
        self.assertEqual(load_game(self.path, 8, 8), s)

    def test_given_nested_path_when_saving_then_directories_created(self):
        nested = os.path.join(self.dir, "a", "b", "save.txt")
        save_game(nested, GameState.new_game())
        self.assertTrue(os.path.isfile(nested))
        # no temp files left behind
        self.assertEqual(os.listdir(os.path.dirname(nested)), ["save.txt"])

    def test_given_unwritable_location_when_saving_then_persistence_error(self):
        blocker = os.path.join(self.dir, "blocker")
        self._write_file(blocker)
        with self.assertRaises(PersistenceError) as ctx:
            save_game(os.path.join(blocker, "save.txt"), GameState.new_game())
        self.assertEqual(ctx.exception.kind, "write")
        self.assertIsInstance(ctx.exception.cause, OSError)

    def _write_file(self, path):
        with open(path, "w", encoding="utf-8") as f:
            f.write("not a directory")

    def test_given_missing_file_when_reading_then_persistence_error_wraps_cause(self):
        with self.assertRaises(PersistenceError) as ctx:
            read_game(self.path)
        self.assertEqual(ctx.exception.kind, "read")
        self.assertIsInstance(ctx.exception.cause, FileNotFoundError)

    def test_given_corrupt_file_when_reading_then_format_error(self):
        self._write("x9\n")
        with self.assertRaises(FormatError):
            read_game(self.path)

    def test_given_non_utf8_file_when_reading_then_format_error_and_fresh_game_on_load(self):
        with open(self.path, "wb") as f:
            f.write(b"x00\n\xff\xfe--\n")
        with self.assertRaises(FormatError):
            read_game(self.path)
        with self.assertLogs("reversi_core.storage", level="WARNING"):
            self.assertEqual(load_or_new_game(self.path, 8, 8), GameState.new_game())

    def test_given_wrong_dimensions_when_loading_then_dimension_mismatch(self):
        self._write("x00\n---\n--")
        with self.assertRaises(DimensionMismatchError):
            load_game(self.path, 3, 2)
        self._write("x00\n---\n---\n---")
        self.assertTrue(load_game(self.path, 3, 3).board.has_shape(3, 3))
        with self.assertRaises(DimensionMismatchError):
            load_game(self.path, 8, 8)

    def test_given_finished_game_when_loading_then_not_resumable(self):
        self._write("-00\nxo\nox")
        with self.assertRaises(FinishedGameError) as ctx:
            load_game(self.path, 2, 2)
        self.assertEqual(ctx.exception.path, self.path)
        self.assertNotIsInstance(ctx.exception, PersistenceError)

    def test_given_unusable_saves_when_load_or_new_then_fresh_game(self):
        fresh = GameState.new_game()
        self.assertEqual(load_or_new_game(self.path), fresh)  # missing
        for text in ["garbage", "x00\n---\n--", "-00\n" + "\n".join(["-" * 8] * 8)]:
            with self.subTest(text=text):
                self._write(text)
                with self.assertLogs("reversi_core.storage", level="WARNING"):
                    self.assertEqual(load_or_new_game(self.path), fresh)

    def test_given_valid_save_when_load_or_new_then_restored(self):
        s = GameState.new_game(player1=Player.AUTOMATIC).with_turn(Disk.LIGHT)
        save_game(self.path, s)
        self.assertEqual(load_or_new_game(self.path, 8, 8), s)


if __name__ == '__main__':
    unittest.main(verbosity=2)
