# tests/unit/services/test_connection_manager.py
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from arm_backend.services.websockets.manager import ConnectionManager


def make_socket(fail=False):
    socket = MagicMock()
    socket.accept = AsyncMock()
    socket.send_text = AsyncMock(side_effect=RuntimeError("closed") if fail else None)
    return socket


@pytest.mark.asyncio
async def test_connect_accepts_and_tracks():
    manager = ConnectionManager()
    socket = make_socket()

    await manager.connect(socket)

    socket.accept.assert_awaited_once()
    assert socket in manager.active_connections


@pytest.mark.asyncio
async def test_broadcast_drops_failing_socket():
    manager = ConnectionManager()
    good, bad = make_socket(), make_socket(fail=True)
    await manager.connect(good)
    await manager.connect(bad)

    delivered = await manager.broadcast({"type": "new_message", "message": "Salut"})

    assert delivered == 1
    good.send_text.assert_awaited_once_with(json.dumps({"type": "new_message", "message": "Salut"}))
    assert manager.active_connections == {good}


@pytest.mark.asyncio
async def test_broadcast_with_no_sockets():
    assert await ConnectionManager().broadcast({"type": "new_message"}) == 0


def test_disconnect_unknown_socket_is_noop():
    manager = ConnectionManager()
    manager.disconnect(make_socket())
    assert manager.active_connections == set()


@pytest.mark.asyncio
async def test_send_personal_message():
    manager = ConnectionManager()
    socket = make_socket()
    await manager.send_personal_message({"type": "error", "content": "x"}, socket)
    socket.send_text.assert_awaited_once_with('{"type": "error", "content": "x"}')
