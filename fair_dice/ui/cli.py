"""
cli.py
Command-line entry point: parses the dice definitions, wires the console I/O into a GameEngine and plays one game.
Usage:
    fair-dice 2,2,4,4,9,9 6,8,1,1,8,6 7,5,3,7,5,3
    fair-dice --opponent highest_mean --transcript data/transcript.csv 1,2,3,4,5,6 2,2,4,4,9,9 6,8,1,1,8,6
Definitions that start with a minus sign go after "--".
"""

import argparse
import logging
import sys
from typing import List, Optional

from fair_dice.agents import agent_names, create_agent
from fair_dice.core.config import GameConfig
from fair_dice.core.dice import parse_dice_sets
from fair_dice.core.engine import GameEngine
from fair_dice.core.errors import DiceSpecError, EntropySourceUnavailable, UnknownAgentError
from fair_dice.core.state import DONE
from fair_dice.persistence.transcript import write_transcript
from .console import ConsoleCollector, ConsoleDisplay

logger = logging.getLogger(__name__)

USAGE_EXAMPLE = 'Example: fair-dice 2,2,4,4,9,9 6,8,1,1,8,6 7,5,3,7,5,3'
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fair-dice",
        description="Play a provably fair dice game against the computer.",
        epilog=USAGE_EXAMPLE,
    )
    parser.add_argument("dice", nargs="*", help="Dice definitions: comma-separated face values, at least three dice.")
    parser.add_argument("--opponent", default="fixed", help=f"Opponent agent ({', '.join(agent_names())}).")
    parser.add_argument("--transcript", default=None, help="Append the game's verification transcript to this CSV file.")
    parser.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
                        help="Logging level written to stderr (default WARNING).")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.
    Args:
        argv (list[str], optional): Arguments without the program name. Defaults to sys.argv[1:].
    Returns:
        int: Process exit status.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    config = GameConfig()

    try:
        dice_sets = parse_dice_sets(args.dice, config)
    except DiceSpecError as e:
        print(f"Error: {e}")
        print(USAGE_EXAMPLE)
        return 2

    try:
        agent = create_agent(args.opponent, config)
    except UnknownAgentError as e:
        print(f"Error: {e}")
        return 2

    display = ConsoleDisplay()
    engine = GameEngine(dice_sets, ConsoleCollector(display, config), display, config=config, agent=agent)
    try:
        state = engine.play()
    except KeyboardInterrupt:
        print("\nGoodbye.")
        return 0
    except EntropySourceUnavailable as e:
        logger.error("Secure random source unavailable: %s", e)
        print(f"Error: {e}")
        return 1

    if args.transcript and state.status == DONE:
        try:
            game_id = write_transcript(engine.get_events(), args.transcript)
        except OSError as e:
            logger.error("Could not write transcript %s: %s", args.transcript, e)
            print(f"Error: could not write transcript to {args.transcript}: {e}")
            return 1
        logger.info("Transcript for game %s appended to %s", game_id, args.transcript)
    return 0


if __name__ == "__main__":
    sys.exit(main())
