"""LAN routing policy for peers.

A peer either routes everything (``ALL_IPS``) or routes the public IPv4
internet only (``IPV4_PUBLIC_NETWORKS``). The public table is the complement
of private (RFC 1918), loopback, link-local and multicast/reserved space.

This table deliberately differs from the older 30-block list, whose
64.0.0.0/2 and 168.0.0.0/6 blocks still route loopback and link-local space.
Allowed-IPs text written with the older list is not reported as
LAN-excluded; applying exclude_lan again rewrites it to this table.
"""

from ..common.utils import join_and_trim
from ..config.models import ALL_IPS, ParsedTunnel, Peer

IPV4_PUBLIC_NETWORKS: tuple[str, ...] = (
    "0.0.0.0/5",
    "8.0.0.0/7",
    # 10.0.0.0/8 private
    "11.0.0.0/8",
    "12.0.0.0/6",
    "16.0.0.0/4",
    "32.0.0.0/3",
    "64.0.0.0/3",
    "96.0.0.0/4",
    "112.0.0.0/5",
    "120.0.0.0/6",
    "124.0.0.0/7",
    "126.0.0.0/8",
    # 127.0.0.0/8 loopback
    "128.0.0.0/3",
    "160.0.0.0/5",
    "168.0.0.0/8",
    "169.0.0.0/9",
    "169.128.0.0/10",
    "169.192.0.0/11",
    "169.224.0.0/12",
    "169.240.0.0/13",
    "169.248.0.0/14",
    "169.252.0.0/15",
    # 169.254.0.0/16 link-local
    "169.255.0.0/16",
    "170.0.0.0/7",
    "172.0.0.0/12",
    # 172.16.0.0/12 private
    "172.32.0.0/11",
    "172.64.0.0/10",
    "172.128.0.0/9",
    "173.0.0.0/8",
    "174.0.0.0/7",
    "176.0.0.0/4",
    "192.0.0.0/9",
    "192.128.0.0/11",
    "192.160.0.0/13",
    # 192.168.0.0/16 private
    "192.169.0.0/16",
    "192.170.0.0/15",
    "192.172.0.0/14",
    "192.176.0.0/12",
    "192.192.0.0/10",
    "193.0.0.0/8",
    "194.0.0.0/7",
    "196.0.0.0/6",
    "200.0.0.0/5",
    "208.0.0.0/4",
    # 224.0.0.0/3 multicast and reserved
)

IPV4_PUBLIC_NETWORKS_TEXT = join_and_trim(IPV4_PUBLIC_NETWORKS)
ALL_IPS_TEXT = join_and_trim(ALL_IPS)


def exclude_lan(peer: Peer) -> Peer:
    """Route the public internet only."""
    return peer.model_copy(update={"allowed_ips": IPV4_PUBLIC_NETWORKS})


def include_lan(peer: Peer) -> Peer:
    """Route everything, LAN included."""
    return peer.model_copy(update={"allowed_ips": ALL_IPS})


def is_lan_excluded(peer: Peer) -> bool:
    """True only if the allowed IPs read exactly as the public table.

    The comparison is textual: a reordered or otherwise rewritten list with
    the same coverage is not considered LAN-excluded.
    """
    return peer.allowed_ips_text == IPV4_PUBLIC_NETWORKS_TEXT


def exclude_lan_all(tunnel: ParsedTunnel) -> ParsedTunnel:
    """Apply exclude_lan to every peer of a tunnel."""
    return tunnel.with_peers(exclude_lan(peer) for peer in tunnel.peers)


def include_lan_all(tunnel: ParsedTunnel) -> ParsedTunnel:
    """Apply include_lan to every peer of a tunnel."""
    return tunnel.with_peers(include_lan(peer) for peer in tunnel.peers)
