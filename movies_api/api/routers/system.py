"""
System API endpoints (greeting, heartbeat).
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["system"])


@router.get("/", response_class=PlainTextResponse)
def root():
    """Root endpoint."""
    return "Welcome to the movie API!"


@router.get("/heartbeat", response_class=PlainTextResponse)
def heartbeat():
    """Liveness check; touches no dataset."""
    return "Have fun with the project!"
