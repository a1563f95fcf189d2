import pytest

from notekeeper.core.services.health_service import HealthService


class BrokenSession:
    async def execute(self, stmt):
        raise ConnectionError("db down")


@pytest.mark.asyncio
async def test_healthy_database(test_session, test_settings):
    status = await HealthService(test_session, test_settings).get_health_status()

    assert status.status == "healthy"
    assert status.version == test_settings.app_version
    assert status.checks["database"]["connected"] is True


@pytest.mark.asyncio
async def test_unreachable_database(test_settings):
    svc = HealthService(BrokenSession(), test_settings)

    db = await svc.check_database_health()
    status = await svc.get_health_status()

    assert db == {"connected": False, "status": "unhealthy", "error": "ConnectionError", "response_time_ms": 0.0}
    assert status.status == "unhealthy"
