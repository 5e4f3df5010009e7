"""
Celebrity clique search over an acquaintance relation.

A celebrity clique C of a party is a non-empty set of actors such that
everybody at the party knows every member of C, but members of C know only
each other. The search is exhaustive over the power set of the party, so it
is only meant for small parties.

Reference: R. Bird, "Pearls of Functional Algorithm Design", chapter 9,
"Finding celebrities".

Complexity (n = party size):
- is_clique: O(|subset|²)
- is_cclique: O(n × |subset|)
- find_celebrity_clique: O(2^n × n²) in the worst case
"""

import logging
from collections.abc import Iterable, Set

from celebrity.types import Actor, ActorId, Entry, Party
from celebrity.utils.algorithms.sets import power_set

logger = logging.getLogger(__name__)


def build_party(entries: Iterable[Entry]) -> Party:
    """
    Build a party from raw (id, known ids) pairs.

    Self-references are stripped by Actor. When the same id appears more
    than once, the last entry overwrites the earlier ones.
    """
    actors: dict[ActorId, Actor] = {}
    for entry in entries:
        actor = Actor.from_entry(entry)
        if actor.id in actors:
            logger.warning(f"Duplicate actor id {actor.id}, keeping the last entry")
        actors[actor.id] = actor
    return frozenset(actors.values())


def is_clique(subset: Set[Actor]) -> bool:
    """
    Whether every member of `subset` knows every other member.

    Self-knowledge is implicit, so the empty set and singletons are cliques.
    """
    clique = {member.id for member in subset}
    return all(
        not (clique - member.known_people - {member.id}) for member in subset
    )


def is_cclique(subset: Set[Actor], party: Set[Actor]) -> bool:
    """
    Whether `subset` is a celebrity clique of `party`.

    For every `someone` at the party and every `celebrity` in the subset:
        1. someone knows the celebrity
        2. if the celebrity knows someone, someone belongs to the subset

    The arguments are not interchangeable: `subset` is the candidate and
    `party` the whole universe of actors. The empty subset passes vacuously.

    Theorem:
        Every celebrity clique is a clique.
    """
    for someone in party:
        for celebrity in subset:
            if not someone.knows(celebrity) or (
                celebrity.knows(someone) and someone not in subset
            ):
                return False
    return True


def find_celebrity_clique(party: Party) -> frozenset[Actor] | None:
    """
    Exhaustive search of the celebrity clique of `party`.

    Theorem:
        There is at most one non-empty celebrity clique.

    Proof:
        Let C1 and C2 be celebrity cliques, c1 in C1 and c2 in C2. Everybody
        knows every member of C2, so c1 knows c2. Members of C1 know only
        members of C1, so c2 is in C1. Since c2 was arbitrary, C2 ⊆ C1, and
        by symmetry C1 ⊆ C2.

    Hence the first match in the enumeration is the answer, whatever the
    order.

    Returns:
        The celebrity clique, or None when the party has none.
    """
    logger.debug(f"Searching celebrity clique among {len(party)} actors")

    # Skip the empty subset, which satisfies is_cclique vacuously
    candidates = power_set(party)[1:]
    celebrities = next(
        (candidate for candidate in candidates if is_cclique(candidate, party)),
        None,
    )

    if celebrities is None:
        logger.info("No celebrity clique")
    else:
        logger.info(
            f"Found celebrity clique with {len(celebrities)} actors: "
            f"{sorted(actor.id for actor in celebrities)}"
        )
    return celebrities
