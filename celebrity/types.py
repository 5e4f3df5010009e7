"""
Type definitions for the acquaintance relation.

An Actor is identified by its id alone; the ids it knows are carried along
but take no part in equality or hashing, so a Party (a set of actors) is
unique by id.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

type ActorId = int
type Entry = tuple[ActorId, Iterable[ActorId]]


@dataclass(frozen=True, slots=True)
class Actor:
    """
    Someone at the party.

    Attributes:
        id: Non-negative identifier, unique within a party.
        known_people: Ids of the other actors this one acknowledges knowing.
            Never contains `id` itself: self-knowledge is implicit.
    """

    id: ActorId
    known_people: frozenset[ActorId] = field(default=frozenset(), compare=False)

    def __post_init__(self) -> None:
        # Remove myself
        object.__setattr__(
            self,
            "known_people",
            frozenset(people_id for people_id in self.known_people if people_id != self.id),
        )

    @classmethod
    def from_entry(cls, entry: Entry) -> "Actor":
        """Build an actor from a raw (id, known ids) pair."""
        id, known_ids = entry
        return cls(id, frozenset(known_ids))

    def knows(self, other: "Actor") -> bool:
        """x knows x for all x, otherwise only the acknowledged ids."""
        return self == other or other.id in self.known_people

    def __str__(self) -> str:
        return f"id: {self.id} knows {{{', '.join(map(str, sorted(self.known_people)))}}}"


type Party = frozenset[Actor]


__all__ = ["Actor", "ActorId", "Entry", "Party"]
