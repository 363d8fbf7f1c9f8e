"""
Integration tests for application startup.
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

pytestmark = pytest.mark.integration


def test_startup_fails_when_indexes_cannot_be_created():
    from devconnect.main import app

    failing = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers available"))
    with patch("devconnect.main.ensure_indexes", new=failing), patch(
        "devconnect.main.close_client"
    ) as close_client:
        with pytest.raises(ServerSelectionTimeoutError):
            with TestClient(app):
                pass

    failing.assert_awaited_once()
    close_client.assert_called()


def test_startup_creates_indexes():
    from devconnect.main import app

    ensure = AsyncMock()
    with patch("devconnect.main.ensure_indexes", new=ensure), patch("devconnect.main.close_client"):
        with TestClient(app) as client:
            assert client.get("/health").status_code == 200

    ensure.assert_awaited_once()
