"""FastAPI dependencies."""

from fastapi import HTTPException, Request

from infrastructure.container import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container built by the lifespan.

    Raises:
        HTTPException: 503 if the application has not finished startup
    """
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise HTTPException(status_code=503, detail="Service not ready")
    return container
