"""Unit tests for broadcast use cases."""

import pytest

from tbn.adapter.tbn.client import TbnPageClient
from tbn.application.usecase.broadcast import (
    GetBroadcastInfoRequest,
    GetBroadcastInfoUseCase,
    ListRegionsUseCase,
)
from tbn.config import DEFAULT_REGIONS
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetBroadcastInfoUseCase:
    """Tests for GetBroadcastInfoUseCase."""

    @pytest.mark.asyncio
    async def test_returns_info_for_region(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetBroadcastInfoUseCase)
        page_client = await unit_env.get(TbnPageClient)

        # Act
        response = await use_case.execute(GetBroadcastInfoRequest(region_code="4"))

        # Assert
        assert response.region_name == "대구"
        assert response.title == "출발 서울대행진"
        assert page_client.requested == ["4"]


class TestListRegionsUseCase:
    """Tests for ListRegionsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_configured_regions(self, unit_env):
        use_case = await unit_env.get(ListRegionsUseCase)

        regions = await use_case.execute()

        assert regions == DEFAULT_REGIONS
