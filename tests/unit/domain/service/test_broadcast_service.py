"""Unit tests for BroadcastService."""

from types import MappingProxyType

import pytest

from tbn.domain.error import BroadcastFetchError, BroadcastParseError
from tbn.domain.model import BroadcastDetails, LookupFailure
from tbn.domain.model.broadcast import LOAD_FAILED, NOT_AVAILABLE, UNKNOWN_REGION
from tbn.domain.service import BroadcastPageClient, BroadcastService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

REGIONS = MappingProxyType({"2": "부산", "6": "경인"})


class _FailingPageClient(BroadcastPageClient):
    def __init__(self, error: Exception):
        self.error = error

    async def fetch_page(self, region_code: str) -> str:
        raise self.error


class _StaticPageClient(BroadcastPageClient):
    async def fetch_page(self, region_code: str) -> str:
        return "<html></html>"


def _failing_parser(html: str) -> BroadcastDetails:
    raise BroadcastParseError("layout changed")


def test_page_client_port_cannot_be_instantiated():
    with pytest.raises(TypeError):
        BroadcastPageClient()


class TestLookup:
    """Tests for lookup and resolve methods."""

    @pytest.mark.asyncio
    async def test_lookup_with_mock_page(self, unit_env):
        """Mock station page should parse into complete info."""
        # Arrange
        service = await unit_env.get(BroadcastService)

        # Act
        info = await service.lookup("2")

        # Assert
        assert info.title == "출발 서울대행진"
        assert info.mc == "홍길동"
        assert info.time == "07:00 ~ 09:00"
        assert info.region_code == "2"
        assert info.region_name == "부산"

    @pytest.mark.asyncio
    async def test_unknown_region_gets_placeholder_name(self, unit_env):
        """Unknown area codes are still looked up."""
        service = await unit_env.get(BroadcastService)

        info = await service.lookup("99")

        assert info.region_name == UNKNOWN_REGION
        assert info.region_code == "99"

    @pytest.mark.asyncio
    async def test_fetch_failure_degrades_to_placeholders(self):
        """Download errors should never reach the caller."""
        # Arrange
        service = BroadcastService(
            page_client=_FailingPageClient(BroadcastFetchError("timeout")),
            parser=lambda html: BroadcastDetails(),
            regions=REGIONS,
        )

        # Act
        result = await service.resolve("6")

        # Assert
        assert not result.ok
        assert result.failure == LookupFailure.FETCH
        assert "timeout" in result.error
        assert result.info.title == LOAD_FAILED
        assert result.info.mc == LOAD_FAILED
        assert result.info.time == LOAD_FAILED
        assert result.info.region_name == "경인"

    @pytest.mark.asyncio
    async def test_unexpected_fetch_error_is_contained(self):
        """Even unexpected client errors produce placeholders."""
        service = BroadcastService(
            page_client=_FailingPageClient(RuntimeError("boom")),
            parser=lambda html: BroadcastDetails(),
            regions=REGIONS,
        )

        info = await service.lookup("2")

        assert info.title == LOAD_FAILED

    @pytest.mark.asyncio
    async def test_parse_failure_degrades_to_placeholders(self):
        """Parser errors should be reported as a parse failure."""
        # Arrange
        service = BroadcastService(
            page_client=_StaticPageClient(),
            parser=_failing_parser,
            regions=REGIONS,
        )

        # Act
        result = await service.resolve("2")

        # Assert
        assert result.failure == LookupFailure.PARSE
        assert result.info.title == LOAD_FAILED

    @pytest.mark.asyncio
    async def test_missing_fields_become_not_available(self):
        """Fields absent from the page are shown as not available."""
        # Arrange
        service = BroadcastService(
            page_client=_StaticPageClient(),
            parser=lambda html: BroadcastDetails(title="교통정보"),
            regions=REGIONS,
        )

        # Act
        result = await service.resolve("2")

        # Assert
        assert result.ok
        assert result.info.title == "교통정보"
        assert result.info.mc == NOT_AVAILABLE
        assert result.info.time == NOT_AVAILABLE


class TestRegions:
    """Tests for the region table."""

    @pytest.mark.asyncio
    async def test_list_regions_returns_copy(self, unit_env):
        """Mutating the returned dict must not change the service."""
        # Arrange
        service = await unit_env.get(BroadcastService)

        # Act
        regions = service.list_regions()
        regions["2"] = "changed"

        # Assert
        assert service.list_regions()["2"] == "부산"
        assert service.region_name("6") == "경인"

    @pytest.mark.asyncio
    async def test_region_table_is_read_only(self, unit_env):
        """The injected table cannot be mutated."""
        service = await unit_env.get(BroadcastService)

        with pytest.raises(TypeError):
            service.regions["2"] = "changed"
