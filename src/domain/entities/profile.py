"""Profile domain entity."""

from dataclasses import dataclass, field
from enum import StrEnum

REQUIRED_FIELDS: tuple[str, ...] = ("id", "email", "user_name", "first_name", "last_name")


@dataclass
class Profile:
    """Domain entity for a user profile.

    ``followers`` and ``following`` are the two sides of the directed
    follow graph: ``b.id in a.following`` iff ``a.id in b.followers``.
    """

    id: str
    email: str = ""
    bio: str = ""
    photo_url: str = ""
    phone: str = ""
    user_name: str = ""
    first_name: str = ""
    last_name: str = ""
    category: set[str] = field(default_factory=set)
    followers: set[str] = field(default_factory=set)
    following: set[str] = field(default_factory=set)
    gender: str = ""

    def __post_init__(self) -> None:
        """Accept any iterable for the set-valued fields."""
        self.category = set(self.category or ())
        self.followers = set(self.followers or ())
        self.following = set(self.following or ())

    def first_empty_required_field(self) -> str | None:
        """Return the name of the first required field that is empty."""
        for name in REQUIRED_FIELDS:
            if not getattr(self, name):
                return name
        return None

    def follows(self, other_id: str) -> bool:
        return other_id in self.following

    def is_followed_by(self, other_id: str) -> bool:
        return other_id in self.followers


class EdgeChange(StrEnum):
    """Outcome of a follow/unfollow call."""

    CREATED = "created"
    REMOVED = "removed"
    # Only a dangling half of the edge was fixed
    REPAIRED = "repaired"
    UNCHANGED = "unchanged"
