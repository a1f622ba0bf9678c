"""Pokemon and team models."""

from dataclasses import dataclass, field
from typing import Any

# Largest team a user may hold
MAX_TEAM_SIZE = 6


@dataclass(frozen=True)
class Pokemon:
    """A catalog entry eligible for team membership.

    Team membership compares by ``id`` only; the other fields are display
    data supplied by the catalog.
    """

    id: int | str
    name: str
    sprite: str = ""
    types: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence of type names but store it immutably
        object.__setattr__(self, "types", tuple(self.types))

    def same_as(self, other: "Pokemon") -> bool:
        """True when both entries share an identifier."""
        return self.id == other.id

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "sprite": self.sprite,
            "types": list(self.types),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Pokemon":
        return cls(
            id=data["id"],
            name=data["name"],
            sprite=data.get("sprite") or "",
            types=data.get("types") or (),
        )
