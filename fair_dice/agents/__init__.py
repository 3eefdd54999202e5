"""
Registry of opponent agents, the automated players that decide which dice set the opponent takes.
Use @register_agent("name") above an agent class to make it selectable from the CLI, and
create_agent(name, config) to build one for a game.
Every agent module in this directory is imported at the bottom of this file so its decorator runs.
"""

import importlib
import os
import pkgutil

AGENT_MAP = {}


def register_agent(name):
    """
    Decorator to register an agent class under a lower-case name.
    Usage:
        @register_agent("fixed")
        class FixedIndexAgent(Agent): ...
    Raises:
        ValueError: If another class is already registered under the name.
    """
    key = name.lower()

    def decorator(cls):
        existing = AGENT_MAP.get(key)
        if existing is not None and existing is not cls:
            raise ValueError(f"Agent name {key!r} is already registered to {existing.__name__}")
        AGENT_MAP[key] = cls
        return cls
    return decorator


def agent_names():
    """Registered agent names, sorted."""
    return sorted(AGENT_MAP)


def create_agent(name, config=None):
    """
    Build a registered agent for a game.
    Args:
        name (str): Registered name, case-insensitive (e.g., 'fixed').
        config (GameConfig, optional): Game rules the agent may read. Defaults to GameConfig().
    Returns:
        Agent: The agent instance.
    Raises:
        UnknownAgentError: If the name is not registered.
    """
    from fair_dice.core.config import GameConfig
    from fair_dice.core.errors import UnknownAgentError

    cls = AGENT_MAP.get(name.lower())
    if cls is None:
        raise UnknownAgentError(f"Unknown agent: {name}. Known agents: {', '.join(agent_names())}")
    return cls.from_config(config or GameConfig())


_this_dir = os.path.dirname(__file__)
for _, _modname, _ispkg in pkgutil.iter_modules([_this_dir]):
    if not _ispkg and _modname != "base":
        importlib.import_module(f"{__name__}.{_modname}")
