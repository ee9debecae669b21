"""Post record: author_id references User.id."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Post:
    id: int
    title: str
    content: str
    author_id: int
