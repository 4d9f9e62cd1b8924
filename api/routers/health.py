"""
Health check router.

This router provides the liveness endpoint for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint for the coach API.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}
