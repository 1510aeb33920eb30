"""Tests for database connectivity helpers."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from glycemic_response import database
from glycemic_response.database import check_database_connection, close_database


class TestDatabaseConnection:
    """Tests for check_database_connection."""

    @pytest.mark.asyncio
    async def test_returns_true_when_connected(self):
        with patch("glycemic_response.database.get_engine") as mock_get_engine:
            mock_conn = AsyncMock()

            mock_connect = AsyncMock()
            mock_connect.__aenter__ = AsyncMock(return_value=mock_conn)
            mock_connect.__aexit__ = AsyncMock(return_value=None)

            mock_engine = MagicMock()
            mock_engine.connect.return_value = mock_connect
            mock_get_engine.return_value = mock_engine

            assert await check_database_connection() is True
            mock_conn.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_returns_false_on_exception(self):
        with patch("glycemic_response.database.get_engine") as mock_get_engine:
            mock_engine = MagicMock()
            mock_engine.connect.side_effect = Exception("Connection refused")
            mock_get_engine.return_value = mock_engine

            assert await check_database_connection() is False


class TestCloseDatabase:
    """Tests for close_database."""

    @pytest.mark.asyncio
    async def test_disposes_engine_and_resets_state(self):
        mock_engine = MagicMock()
        mock_engine.dispose = AsyncMock()

        with (
            patch.object(database, "_engine", mock_engine),
            patch.object(database, "_async_session_maker", MagicMock()),
        ):
            await close_database()

            mock_engine.dispose.assert_awaited_once()
            assert database._engine is None
            assert database._async_session_maker is None

    @pytest.mark.asyncio
    async def test_noop_without_engine(self):
        with patch.object(database, "_engine", None):
            await close_database()
            assert database._engine is None
