"""Tests for configuration rendering and dialect round trips."""

import pytest

from tunnel_importer.config import Dialect, parse_config, render_config


class TestRenderConfig:
    def test_render_baseline(self, baseline_config, private_key, peer_key, psk):
        """Test attributes are written in canonical order"""
        tunnel = parse_config(baseline_config, Dialect.BASELINE)

        assert render_config(tunnel, Dialect.BASELINE) == (
            "[Interface]\n"
            "Address = 10.8.0.2/32, fd00::2/128\n"
            "DNS = 1.1.1.1, 9.9.9.9\n"
            "ListenPort = 51820\n"
            f"PrivateKey = {private_key}\n"
            "\n"
            "[Peer]\n"
            "AllowedIPs = 0.0.0.0/0, ::/0\n"
            "Endpoint = 203.0.113.5:51820\n"
            "PersistentKeepalive = 25\n"
            f"PresharedKey = {psk}\n"
            f"PublicKey = {peer_key}\n"
        )

    def test_extended_fields_written_after_private_key(self, extended_config):
        """Test obfuscation attributes follow the baseline interface attributes"""
        text = render_config(parse_config(extended_config), Dialect.EXTENDED)
        lines = text.splitlines()

        assert lines.index("Jc = 4") > lines.index(next(line for line in lines if line.startswith("PrivateKey")))
        assert "H4 = 4567890" in lines

    def test_baseline_render_drops_extended_fields(self, extended_config):
        """Test rendering to the baseline dialect omits obfuscation attributes"""
        tunnel = parse_config(extended_config)
        text = render_config(tunnel, Dialect.BASELINE)

        for key in ("Jc", "Jmin", "Jmax", "S1", "S2", "H1", "H2", "H3", "H4"):
            assert f"{key} =" not in text

        reparsed = parse_config(text, Dialect.BASELINE)
        assert reparsed.interface.junk_packet_count is None
        assert reparsed.peers == tunnel.peers
        assert reparsed.interface.private_key == tunnel.interface.private_key

    def test_render_without_peers(self, private_key):
        """Test an interface-only configuration"""
        tunnel = parse_config(f"[Interface]\nPrivateKey = {private_key}\n")
        assert render_config(tunnel) == f"[Interface]\nPrivateKey = {private_key}\n"


class TestRoundTrip:
    @pytest.mark.parametrize("dialect", [Dialect.BASELINE, Dialect.EXTENDED])
    def test_baseline_round_trip(self, baseline_config, dialect):
        """Test parse -> render -> parse is lossless for baseline text"""
        tunnel = parse_config(baseline_config, dialect)
        assert parse_config(render_config(tunnel, dialect), dialect) == tunnel

    def test_extended_round_trip(self, extended_config):
        """Test parse -> render -> parse is lossless for extended text"""
        tunnel = parse_config(extended_config, Dialect.EXTENDED)
        rendered = render_config(tunnel, Dialect.EXTENDED)
        assert parse_config(rendered, Dialect.EXTENDED) == tunnel

    def test_round_trip_with_all_optional_fields(self, private_key, peer_key, second_peer_key):
        """Test rarely used attributes survive a round trip"""
        text = f"""[Interface]
PrivateKey = {private_key}
Address = 10.0.0.2
MTU = 1280
IncludedApplications = org.example.browser, org.example.mail
S3 = 10
S4 = 20
I1 = <b 0xf6ab3267fa><c><b 0xf6ab><t><r 10>

[Peer]
PublicKey = {peer_key}
Endpoint = [2001:db8::1]:443
PersistentKeepalive = 0

[Peer]
PublicKey = {second_peer_key}
AllowedIPs = 192.168.1.0/24
"""
        tunnel = parse_config(text)
        assert tunnel.interface.special_junk_1 == "<b 0xf6ab3267fa><c><b 0xf6ab><t><r 10>"
        assert parse_config(render_config(tunnel)) == tunnel
