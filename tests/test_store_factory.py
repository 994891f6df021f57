"""Tests for the lifecycle store factory."""

from unittest.mock import patch

import pytest

from app.services.store.api_store import PlatformAPIStore
from app.services.store.factory import create_lifecycle_store
from app.services.store.sql_store import SQLLifecycleStore


class TestCreateLifecycleStore:
    """Tests for create_lifecycle_store."""

    def test_database_backend(self):
        """Test the database backend yields the SQL store."""
        with patch("app.services.store.factory.settings") as mock_settings:
            mock_settings.store_backend = "database"
            assert isinstance(create_lifecycle_store(), SQLLifecycleStore)

    @pytest.mark.asyncio
    async def test_api_backend(self):
        """Test the api backend yields the REST store."""
        with patch("app.services.store.factory.settings") as mock_settings:
            mock_settings.store_backend = "api"
            store = create_lifecycle_store()

        assert isinstance(store, PlatformAPIStore)
        await store.close()

    def test_unknown_backend(self):
        """Test an unknown backend is rejected."""
        with patch("app.services.store.factory.settings") as mock_settings:
            mock_settings.store_backend = "redis"
            with pytest.raises(ValueError):
                create_lifecycle_store()
