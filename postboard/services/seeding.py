"""Seed data loaded into a fresh store at every process start."""
from postboard.db.store import EntityStore
from postboard.models import Post, User

SEED_USERS = [
    User(id=1, email="john@example.com", password="password123", name="John Doe"),
    User(id=2, email="jane@example.com", password="password456", name="Jane Smith"),
    User(id=3, email="admin@company.com", password="admin123", name="Admin User"),
]

SEED_POSTS = [
    Post(id=1, title="First Post", content="This is the first post", author_id=1),
    Post(id=2, title="Second Post", content="This is the second post", author_id=2),
    Post(id=3, title="Admin Post", content="Admin announcement", author_id=3),
]


def seed_store() -> EntityStore:
    """Return a new store holding the demo users and posts, with no comments."""
    return EntityStore(users=SEED_USERS, posts=SEED_POSTS)
