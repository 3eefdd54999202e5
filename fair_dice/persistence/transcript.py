"""
transcript.py
Turns the engine's events into transcript rows and appends them to a CSV file, so every
digest, key and secret value of a finished game can be checked afterwards.
Related modules:
- csv_io.py: CSV writing.
- serializer.py: Event payloads are stored as JSON.
"""

import datetime
import hashlib
import os
from typing import Dict, List

from . import csv_io, serializer


def generate_game_id(timestamp: str) -> str:
    raw = f"fair_dice_{timestamp}_{os.getpid()}"
    return hashlib.sha256(raw.encode()).hexdigest()[:16]


def to_rows(events: List[Dict], game_id: str, timestamp: str) -> List[Dict]:
    rows = []
    for event in events:
        payload = {k: v for k, v in event.items() if k not in ("type", "phase")}
        rows.append({
            "game_id": game_id,
            "event_type": event.get("type"),
            "phase": event.get("phase"),
            "payload": serializer.dumps(payload),
            "timestamp": timestamp,
        })
    return rows


def write_transcript(events: List[Dict], csv_path: str, game_id: str = None) -> str:
    """
    Append a game's events to csv_path, writing the header if the file is new.
    Args:
        events (list[dict]): Events from GameEngine.get_events().
        csv_path (str): Destination file.
        game_id (str, optional): Identifier; generated from the current time if omitted.
    Returns:
        str: The game id used.
    """
    timestamp = datetime.datetime.now(datetime.timezone.utc).isoformat()
    game_id = game_id or generate_game_id(timestamp)
    directory = os.path.dirname(csv_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    csv_io.append_rows_to_csv(to_rows(events, game_id, timestamp), csv_path, csv_io.get_transcript_header())
    return game_id
