import random
import unittest

from game import (
    Disk,
    GameState,
    TurnOutcome,
    advance_turn,
    apply_move,
    count_disks,
    decode,
    encode,
    game_result,
    valid_moves,
)


def play_random_game(seed, width=8, height=8):
    """Plays a full random game, checking disk accounting and the save format after every step."""
    rng = random.Random(seed)
    state = GameState.new_game(width, height)
    states = [state]
    while state.turn is not None:
        side = state.turn
        move = rng.choice(valid_moves(state, side))
        dark, light = count_disks(state, Disk.DARK), count_disks(state, Disk.LIGHT)
        res = apply_move(state, side, *move)
        n = len(res.flipped)
        mine, theirs = (dark, light) if side is Disk.DARK else (light, dark)
        after_mine = count_disks(res.state, side)
        after_theirs = count_disks(res.state, side.flipped)
        assert after_mine == mine + 1 + n
        assert after_theirs == theirs - n
        turn = advance_turn(res.state)
        if turn.outcome is TurnOutcome.PASSED:
            assert turn.state.turn is side
        state = turn.state
        states.append(state)
    return states


class TestReversiBasics(unittest.TestCase):
    def test_random_games_terminate_with_a_result(self):
        for seed in range(5):
            states = play_random_game(seed)
            final = states[-1]
            self.assertIsNone(final.turn)
            result = game_result(final)
            self.assertIsNotNone(result)
            # each move adds exactly one disk
            self.assertEqual(result.dark + result.light, 4 + len(states) - 1)
            self.assertLessEqual(result.dark + result.light, 64)

    def test_every_reachable_state_roundtrips_through_save_format(self):
        for s in play_random_game(11, 6, 6):
            self.assertEqual(decode(encode(s)), s)

    def test_small_board_game_ends(self):
        self.assertIsNone(play_random_game(2, 4, 4)[-1].turn)


if __name__ == '__main__':
    unittest.main(verbosity=2)
