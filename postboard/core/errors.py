"""
Custom exceptions for the Postboard API.

Resolvers raise these; strawberry reports their message in the
``errors`` array of the response envelope.
"""


class PostboardError(Exception):
    """Base exception for all postboard errors."""
    pass


class AuthenticationError(PostboardError):
    """Raised when an operation needs an authenticated viewer."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised on a failed login. Does not say which field was wrong."""

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class ValidationError(PostboardError):
    """Raised when mutation input is rejected."""
    pass


class GraphQLClientError(PostboardError):
    """Raised by the client when a response carries GraphQL errors."""

    def __init__(self, messages: list[str]):
        self.messages = messages
        super().__init__("; ".join(messages) or "GraphQL request failed")
