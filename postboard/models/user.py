"""User record. Seeded at startup, never mutated."""
from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: int
    email: str  # stored casing
    password: str  # plaintext, compared verbatim
    name: str
