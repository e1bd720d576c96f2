"""Tests for the persistable tunnel record."""

import pytest
from pydantic import ValidationError

from tunnel_importer.config import Dialect, parse_config
from tunnel_importer.tunnels import TunnelConfig


class TestTunnelConfig:
    def test_from_parsed_renders_both_dialects(self, extended_config):
        """Test both dialect texts are rendered from the parsed tunnel"""
        tunnel = parse_config(extended_config)
        record = TunnelConfig.from_parsed(tunnel, "office")

        assert record.name == "office"
        assert record.is_primary_tunnel is False
        assert "Jc = 4" in record.am_quick
        assert "Jc" not in record.wg_quick
        assert parse_config(record.wg_quick, Dialect.BASELINE).peers == tunnel.peers

    def test_parsed_returns_extended_tunnel(self, extended_config):
        """Test the stored extended text decodes back to the same tunnel"""
        tunnel = parse_config(extended_config)
        assert TunnelConfig.from_parsed(tunnel, "office").parsed() == tunnel

    def test_empty_name_rejected(self, baseline_config):
        """Test names must be non-empty"""
        with pytest.raises(ValidationError):
            TunnelConfig.from_parsed(parse_config(baseline_config), "")

    def test_tunnel_immutability(self, baseline_config):
        """Test records are immutable after creation"""
        record = TunnelConfig.from_parsed(parse_config(baseline_config), "home")

        with pytest.raises(ValidationError):
            record.name = "other"

    def test_with_name_and_primary(self, baseline_config):
        """Test modified copies leave the original untouched"""
        record = TunnelConfig.from_parsed(parse_config(baseline_config), "home")

        renamed = record.with_name("home(1)")
        primary = record.with_primary(True)

        assert renamed.name == "home(1)"
        assert renamed.am_quick == record.am_quick
        assert primary.is_primary_tunnel is True
        assert record.name == "home"
        assert record.is_primary_tunnel is False
