"""
Dependencies shared by every router.

The engine comes from the application state set up by the lifespan.
"""

from fastapi import Request
from sqlalchemy.engine import Engine


def get_engine(request: Request) -> Engine:
    """Return the engine owned by the running application."""
    return request.app.state.engine
