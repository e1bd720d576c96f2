"""Tests for the in-memory tunnel repository."""

import pytest

from tunnel_importer.config import parse_config
from tunnel_importer.tunnels import (
    InMemoryTunnelRepository,
    TunnelConfig,
    TunnelRepository,
    TunnelRepositoryError,
)


@pytest.fixture
def record(baseline_config):
    return TunnelConfig.from_parsed(parse_config(baseline_config), "home")


class TestInMemoryTunnelRepository:
    def test_implements_protocol(self, repository):
        """Test the in-memory store satisfies the repository protocol"""
        assert isinstance(repository, TunnelRepository)

    @pytest.mark.asyncio
    async def test_save_and_get(self, repository, record):
        """Test saved tunnels can be fetched by name"""
        await repository.save(record)

        assert await repository.get("home") == record
        assert await repository.get("missing") is None
        assert await repository.get_all_tunnel_names() == {"home"}
        assert await repository.count() == 1

    @pytest.mark.asyncio
    async def test_save_replaces_same_name(self, repository, record):
        """Test saving a record with an existing name replaces it"""
        await repository.save(record)
        await repository.save(record.with_primary(True))

        assert await repository.count() == 1
        assert (await repository.get("home")).is_primary_tunnel is True

    @pytest.mark.asyncio
    async def test_names_are_a_snapshot(self, repository, record):
        """Test the returned name set does not track later changes"""
        names = await repository.get_all_tunnel_names()
        await repository.save(record)

        assert names == set()

    @pytest.mark.asyncio
    async def test_delete(self, repository, record):
        """Test deleting removes the record"""
        await repository.save(record)
        await repository.delete(record)

        assert await repository.count() == 0

    @pytest.mark.asyncio
    async def test_delete_missing(self, repository, record):
        """Test deleting an unknown tunnel raises"""
        with pytest.raises(TunnelRepositoryError, match="not found"):
            await repository.delete(record)

    @pytest.mark.asyncio
    async def test_list_tunnels_filters_primary(self, repository, record):
        """Test listing with and without the primary filter"""
        await repository.save(record)
        await repository.save(record.with_name("work").with_primary(True))

        assert [t.name for t in await repository.list_tunnels()] == ["home", "work"]
        assert [t.name for t in await repository.list_tunnels(primary=True)] == ["work"]
        assert [t.name for t in await repository.list_tunnels(primary=False)] == ["home"]

    @pytest.mark.asyncio
    async def test_serialization_round_trip(self, repository, record):
        """Test to_dict/from_dict preserve every record"""
        await repository.save(record)
        await repository.save(record.with_name("work").with_primary(True))

        restored = InMemoryTunnelRepository.from_dict(repository.to_dict())

        assert restored.tunnels == repository.tunnels
