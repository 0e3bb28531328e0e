import json

import pytest
from fastapi.responses import JSONResponse

from nicephrase.errors import DictionaryError
from nicephrase.routers import health
from nicephrase.routers.health import health_check, readiness_check


@pytest.mark.asyncio
async def test_health_check_reports_healthy():
    response = await health_check()
    assert response == {"status": "healthy"}


@pytest.mark.asyncio
async def test_readiness_check_reports_loaded_dictionary():
    response = await readiness_check()
    assert response["status"] == "healthy"
    assert response["checks"] == {"dictionary": "canonical"}


@pytest.mark.asyncio
async def test_readiness_check_reports_unavailable_dictionary(monkeypatch):
    def broken_dictionary():
        raise DictionaryError("word table is not the canonical niceware table")

    monkeypatch.setattr(health, "get_dictionary", broken_dictionary)

    response = await readiness_check()

    assert isinstance(response, JSONResponse)
    assert response.status_code == 503
    body = json.loads(response.body)
    assert body["status"] == "unhealthy"
    assert body["checks"] == {"dictionary": "unavailable"}
