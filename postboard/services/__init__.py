from postboard.services.seeding import SEED_POSTS, SEED_USERS, seed_store

__all__ = ["SEED_POSTS", "SEED_USERS", "seed_store"]
