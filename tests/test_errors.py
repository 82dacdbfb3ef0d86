"""Tests for API error rendering."""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.routing import APIRoute
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from starlette.requests import Request

from mission_control.api.app import create_app
from mission_control.api.errors import failure_message, register_error_handlers
from mission_control.api.services.agent_service import AgentService
from mission_control.api.services.event_service import EventService
from mission_control.api.services.message_service import MessageService
from mission_control.api.services.task_service import TaskService
from mission_control.db.database import init_db_manager


def make_request(route=None) -> Request:
    """Helper to build a bare request with an optional matched route."""
    scope = {"type": "http", "method": "GET", "path": "/", "headers": []}
    if route is not None:
        scope["route"] = route
    return Request(scope)


async def list_widgets():
    return []


class TestFailureMessage:
    """Tests for deriving messages from route names."""

    def test_route_name_becomes_message(self):
        """Underscores in the route name become spaces."""
        route = APIRoute("/widgets", list_widgets)
        assert failure_message(make_request(route)) == "Failed to list widgets"

    def test_no_route(self):
        """Without a matched route the message is generic."""
        assert failure_message(make_request()) == "Internal server error"


class TestErrorHandlers:
    """Tests for the registered exception handlers."""

    async def test_database_error_rendered_as_500(self):
        """Store errors become a 500 with the route-derived message."""
        app = FastAPI()
        register_error_handlers(app)

        @app.get("/widgets")
        async def sync_widgets():
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/widgets")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to sync widgets"}

    async def test_unknown_path_rendered_as_error_body(self):
        """Routing 404s use the same error shape."""
        with tempfile.TemporaryDirectory() as tmpdir:
            app = create_app({"db_path": str(Path(tmpdir) / "test.db")})
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                response = await client.get("/api/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


class TestReadRouteMessages:
    """Tests for the wording of failed reads on the real API."""

    @pytest.mark.parametrize(
        "path, service, method, message",
        [
            ("/api/agents", AgentService, "list_all", "Failed to fetch agents"),
            ("/api/agents/some-id", AgentService, "get", "Failed to fetch agent"),
            ("/api/tasks", TaskService, "list_all", "Failed to fetch tasks"),
            ("/api/events", EventService, "list_all", "Failed to fetch events"),
            ("/api/messages", MessageService, "list_all", "Failed to fetch messages"),
        ],
    )
    async def test_failed_read_says_fetch(self, tmp_path, path, service, method, message):
        """Store errors on read routes report "Failed to fetch ..."."""
        app = create_app({"db_path": str(tmp_path / "test.db")})
        db_manager = init_db_manager(tmp_path / "test.db")
        await db_manager.init_db()
        error = OperationalError("SELECT 1", {}, Exception("disk I/O error"))

        try:
            with patch.object(service, method, side_effect=error):
                async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                    response = await client.get(path)
        finally:
            await db_manager.close()

        assert response.status_code == 500
        assert response.json() == {"error": message}
