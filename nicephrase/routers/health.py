"""
Health check endpoints
"""

from datetime import datetime, timezone
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from nicephrase.errors import DictionaryError
from nicephrase.wordlist import get_dictionary

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic liveness probe - returns healthy if the service is running"""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check():
    """
    Readiness probe.
    Returns 200 once the word table is loaded and verified, 503 otherwise.
    """
    checks = {}
    all_healthy = True

    try:
        dictionary = get_dictionary()
        checks["dictionary"] = "canonical" if dictionary.is_canonical else "custom"
    except DictionaryError:
        checks["dictionary"] = "unavailable"
        all_healthy = False

    response_data = {
        "status": "healthy" if all_healthy else "unhealthy",
        "checks": checks,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if all_healthy:
        return response_data
    else:
        return JSONResponse(status_code=503, content=response_data)
