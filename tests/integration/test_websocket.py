"""
Integration tests for the /ws notifications endpoint.
"""
import pytest

pytestmark = pytest.mark.integration

from starlette.websockets import WebSocketDisconnect

from feed_api.application.services.auth_gate import AuthGate
from feed_api.infrastructure.notifications import WebSocketManager


@pytest.fixture
def manager(registry, token_service):
    registry[WebSocketManager] = websocket_manager = WebSocketManager()
    registry[AuthGate] = AuthGate(token_service)
    return websocket_manager


class TestNotificationsSocket:
    def test_anonymous_connection(self, client, manager):
        with client.websocket_connect("/ws") as websocket:
            greeting = websocket.receive_json()
            assert greeting["type"] == "connection_established"
            assert greeting["userId"] is None
            assert manager.get_total_connections() == 1

            websocket.send_text("ping")
            assert websocket.receive_text() == "pong"

        assert manager.get_total_connections() == 0

    def test_authenticated_connection(self, client, manager, token_service):
        token = token_service.create_token({"email": "a@b.com", "userId": "usr-1"})

        with client.websocket_connect(f"/ws?token={token}") as websocket:
            assert websocket.receive_json()["userId"] == "usr-1"

    def test_invalid_token_rejected(self, client, manager):
        with pytest.raises(WebSocketDisconnect) as exc_info:
            with client.websocket_connect("/ws?token=garbage") as websocket:
                websocket.receive_text()

        assert exc_info.value.code == 1008
        assert manager.get_total_connections() == 0
