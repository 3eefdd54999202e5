import unittest

from fair_dice.core.dice import DiceSet
from fair_dice.core.outcome import HUMAN, OPPONENT, resolve


class TestOutcome(unittest.TestCase):

    def test_human_wins(self):
        human = DiceSet((2, 2, 4, 4, 9, 9))
        opponent = DiceSet((1, 1, 6, 6, 8, 8))
        outcome = resolve(human[5], opponent[2])
        self.assertEqual(outcome.winner, HUMAN)
        self.assertEqual(outcome.describe(), "You win (9 > 6)!")

    def test_opponent_wins(self):
        outcome = resolve(4, 8)
        self.assertEqual(outcome.winner, OPPONENT)
        self.assertEqual(outcome.describe(), "I win (8 > 4)!")

    def test_tie(self):
        outcome = resolve(4, 4)
        self.assertTrue(outcome.is_tie)
        self.assertIsNone(outcome.winner)
        self.assertEqual(outcome.describe(), "It's a tie (4 == 4)!")


if __name__ == '__main__':
    unittest.main()
