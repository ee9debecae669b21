"""
GraphQL package.

Builds the strawberry schema for posts, comments and login.

Example query:
    query {
        posts {
            title
            author { name }
            commentCount
            comments { text createdAt author { name } }
        }
    }
"""
import logging

import strawberry
from strawberry.utils.logging import StrawberryLogger

from postboard.core.errors import PostboardError
from postboard.graphql.mutations import Mutation
from postboard.graphql.queries import Query

logger = logging.getLogger(__name__)


class PostboardSchema(strawberry.Schema):
    """Schema that logs expected domain errors without a traceback."""

    def process_errors(self, errors, execution_context=None) -> None:
        for error in errors:
            if isinstance(error.original_error, PostboardError):
                logger.info(f"GraphQL error: {error.message}")
            else:
                StrawberryLogger.error(error, execution_context)


schema = PostboardSchema(query=Query, mutation=Mutation)

__all__ = ["schema", "PostboardSchema", "Query", "Mutation"]
