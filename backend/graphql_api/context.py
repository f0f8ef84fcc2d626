"""GraphQL context factory for dependency injection.

Resolvers reach the application handlers through the container stored on
the context: ``info.context.get("container")``.
"""

from typing import Any, Optional
from strawberry.fastapi import BaseContext
from fastapi import Request

from infrastructure.container import AppContainer


class GraphQLContext(BaseContext):
    """GraphQL context with the application container.

    Attributes:
        container: Service container built by the app lifespan
        request: FastAPI request object
    """

    def __init__(self, container: AppContainer, request: Optional[Request] = None) -> None:
        super().__init__()
        self.container = container
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name.

        Falls back to container attributes, so
        ``context.get("compute_targets")`` returns the handler.
        """
        if hasattr(self, key):
            return getattr(self, key)
        return getattr(self.container, key, None)


def create_context(container: AppContainer, request: Optional[Request] = None) -> GraphQLContext:
    return GraphQLContext(container=container, request=request)
