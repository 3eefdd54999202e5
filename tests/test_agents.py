import unittest

from fair_dice.agents import AGENT_MAP, agent_names, create_agent, register_agent
from fair_dice.agents.base import Agent
from fair_dice.agents.fixed_agent import FixedIndexAgent
from fair_dice.agents.mean_agent import HighestMeanAgent
from fair_dice.core.config import GameConfig
from fair_dice.core.dice import DiceSet
from fair_dice.core.errors import UnknownAgentError


DICE = [DiceSet((1, 2)), DiceSet((5, 6)), DiceSet((3, 4)), DiceSet((6, 5))]


class TestAgents(unittest.TestCase):
    """
    Tests for the opponent agents: registration, construction from the game config,
    the fixed default index with fallback, and highest-mean choice.
    """

    def test_registry(self):
        self.assertIs(AGENT_MAP["fixed"], FixedIndexAgent)
        self.assertIs(AGENT_MAP["highest_mean"], HighestMeanAgent)
        self.assertEqual(agent_names(), sorted(AGENT_MAP))
        self.assertIsInstance(create_agent("FIXED"), FixedIndexAgent)
        with self.assertRaises(UnknownAgentError):
            create_agent("nope")

    def test_name_clash_is_rejected(self):
        with self.assertRaises(ValueError):
            @register_agent("Fixed")
            class Impostor(Agent):
                def choose_dice(self, dice_sets, available):
                    return available[0]
        self.assertIs(AGENT_MAP["fixed"], FixedIndexAgent)

    def test_agents_built_from_config(self):
        cfg = GameConfig(default_opponent_index=2)
        self.assertEqual(create_agent("fixed", cfg).index, 2)
        self.assertEqual(create_agent("fixed").index, 0)
        self.assertIsInstance(create_agent("highest_mean", cfg), HighestMeanAgent)

    def test_fixed_agent_prefers_its_index(self):
        agent = FixedIndexAgent(index=0)
        self.assertEqual(agent.choose_dice(DICE, [0, 1, 2, 3]), 0)
        self.assertEqual(agent.choose_dice(DICE, [1, 2, 3]), 1)
        self.assertEqual(FixedIndexAgent(index=2).choose_dice(DICE, [0, 1, 2]), 2)

    def test_highest_mean_ties_go_to_lowest_index(self):
        agent = HighestMeanAgent()
        self.assertEqual(agent.choose_dice(DICE, [0, 1, 2, 3]), 1)
        self.assertEqual(agent.choose_dice(DICE, [0, 2, 3]), 3)
        self.assertEqual(agent.choose_dice(DICE, [0, 2]), 2)


if __name__ == '__main__':
    unittest.main()
