"""Postboard - demo GraphQL API for posts and comments."""

__version__ = "0.1.0"
