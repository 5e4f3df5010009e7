"""
Celebrity clique of a party.

**Types** (types.py)
    - Actor: an id and the ids it acknowledges knowing
    - Party: a set of actors, unique by id

**Search** (cliques.py)
    - build_party(entries) -> Party
    - is_clique(subset), is_cclique(subset, party)
    - find_celebrity_clique(party) -> celebrity clique or None

**Export** (export.py)
    Directed graph view of a party, DOT output and Graphviz rendering.
"""

from .cliques import (
    build_party,
    find_celebrity_clique,
    is_clique,
    is_cclique,
)
from .types import Actor, ActorId, Entry, Party

__all__ = [
    # Types
    "Actor",
    "ActorId",
    "Entry",
    "Party",
    # Search
    "build_party",
    "is_clique",
    "is_cclique",
    "find_celebrity_clique",
]
