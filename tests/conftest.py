"""Shared pytest fixtures for tunnel importer tests."""

import base64
import io
import zipfile

import pytest

from tunnel_importer.importer import TunnelImporter
from tunnel_importer.tunnels import InMemoryTunnelRepository


def _key(seed: int) -> str:
    return base64.b64encode(bytes([seed]) * 32).decode()


@pytest.fixture
def private_key():
    """Interface private key."""
    return _key(1)


@pytest.fixture
def peer_key():
    """Public key of the first peer."""
    return _key(2)


@pytest.fixture
def second_peer_key():
    """Public key of a second peer."""
    return _key(3)


@pytest.fixture
def psk():
    """Pre-shared key."""
    return _key(4)


@pytest.fixture
def baseline_config(private_key, peer_key, psk):
    """A baseline (wg-quick) client configuration.

    Returns:
        str: Configuration text
    """
    return f"""[Interface]
PrivateKey = {private_key}
Address = 10.8.0.2/32, fd00::2/128
DNS = 1.1.1.1, 9.9.9.9
ListenPort = 51820

[Peer]
PublicKey = {peer_key}
PresharedKey = {psk}
AllowedIPs = 0.0.0.0/0, ::/0
Endpoint = 203.0.113.5:51820
PersistentKeepalive = 25
"""


@pytest.fixture
def extended_config(private_key, peer_key):
    """An extended (awg-quick) configuration with obfuscation parameters.

    Returns:
        str: Configuration text
    """
    return f"""[Interface]
PrivateKey = {private_key}
Address = 10.9.0.2/32
Jc = 4
Jmin = 40
Jmax = 70
S1 = 52
S2 = 16
H1 = 1234567
H2 = 2345678
H3 = 3456789
H4 = 4567890

[Peer]
PublicKey = {peer_key}
AllowedIPs = 0.0.0.0/0
Endpoint = vpn.example.com:51820
"""


@pytest.fixture
def repository():
    """Empty in-memory tunnel repository."""
    return InMemoryTunnelRepository()


@pytest.fixture
def importer(repository):
    """TunnelImporter over the in-memory repository with local file access."""
    return TunnelImporter(repository)


@pytest.fixture
def zip_bytes():
    """Factory building a zip archive in memory.

    Returns:
        Callable: members (name -> text, or None for a directory) -> bytes
    """

    def build(members):
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            for name, content in members.items():
                if content is None:
                    archive.writestr(name if name.endswith("/") else f"{name}/", "")
                else:
                    archive.writestr(name, content)
        return buffer.getvalue()

    return build
