"""
Module used to import parties from JSON files

A party file maps each actor id to the ids it knows:

    {"1": [2, 3], "2": [1, 3], "3": [1, 2], "4": [1, 2, 3]}
"""

import json
from pathlib import Path

from celebrity.types import ActorId, Entry


def _to_actor_id(value: object, where: str) -> ActorId:
    # bool is an int subclass but never an id
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Error: invalid actor id {value!r} in {where}")
    return value


def path_to_entries(path: str | Path) -> list[Entry]:
    """
    Read a party file into (id, known ids) entries.

    Raises:
        ValueError: If the content is not an object of id -> list of ids.
        OSError: If the file cannot be read.
    """
    with open(path, "r") as file:
        data = json.load(file)

    if not isinstance(data, dict):
        raise ValueError(f"Error: {path} must contain an object mapping ids to lists of ids")

    entries: list[Entry] = []
    for key, known_ids in data.items():
        # Plain decimal only, so two keys never name the same actor
        if not key.isascii() or not key.isdigit() or (len(key) > 1 and key.startswith("0")):
            raise ValueError(f"Error: invalid actor id {key!r} in {path}")
        id = int(key)
        if not isinstance(known_ids, list):
            raise ValueError(f"Error: known ids of {key!r} in {path} must be a list")
        entries.append(
            (id, [_to_actor_id(known_id, f"known ids of {key!r} in {path}") for known_id in known_ids])
        )
    return entries
