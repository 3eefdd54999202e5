"""
csv_io.py
Persistence utilities for writing the verification transcript of a game to a CSV file.
"""

import os
import csv
from typing import Dict, List, Any

TRANSCRIPT_HEADER = ["game_id", "event_type", "phase", "payload", "timestamp"]


def append_rows_to_csv(rows: List[Dict[str, Any]], csv_path: str, header: List[str]):
    write_header = not os.path.exists(csv_path)
    with open(csv_path, "a", newline='', encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=header)
        if write_header:
            writer.writeheader()
        for row in rows:
            writer.writerow(row)


def get_transcript_header():
    return TRANSCRIPT_HEADER.copy()
