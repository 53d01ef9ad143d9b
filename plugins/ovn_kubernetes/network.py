"""
Read-only checks of host network interfaces referenced by the OVN config.

None of these run during config resolution; callers decide whether a failed
check blocks a deployment.
"""

from __future__ import annotations

import logging
from typing import Any

import psutil

from .config import OVNKubernetesConfig

logger = logging.getLogger("microshift.ovn_kubernetes.network")

# Room for geneve encapsulation headers on the uplink.
GENEVE_OVERHEAD = 100


class InterfaceLookupError(LookupError):
    pass


class InterfaceNotFoundError(InterfaceLookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"no such network interface: {name!r}")
        self.name = name


class MTUTooLargeError(ValueError):
    pass


def _interface_stats() -> dict[str, Any]:
    try:
        return psutil.net_if_stats()
    except OSError as exc:
        raise InterfaceLookupError(f"listing host network interfaces: {exc}") from exc


def validate_bridge(name: str) -> None:
    """Raise InterfaceNotFoundError unless `name` is a host network interface."""
    if name not in _interface_stats():
        raise InterfaceNotFoundError(name)


def interface_mtu(name: str) -> int:
    stats = _interface_stats().get(name)
    if stats is None:
        raise InterfaceNotFoundError(name)
    return int(stats.mtu)


def validate_mtu(config: OVNKubernetesConfig, uplink: str) -> None:
    uplink_mtu = interface_mtu(uplink)
    limit = uplink_mtu - GENEVE_OVERHEAD
    if config.mtu > limit:
        raise MTUTooLargeError(
            f"mtu {config.mtu} exceeds {limit} "
            f"(uplink {uplink!r} mtu {uplink_mtu} minus {GENEVE_OVERHEAD})"
        )


def check_host(config: OVNKubernetesConfig) -> list[str]:
    """Run every interface check for `config` and collect the problems found."""
    problems: list[str] = []
    missing: set[str] = set()
    gateways = (
        ("gatewayInterface", config.ovs_init.gateway_interface),
        ("externalGatewayInterface", config.ovs_init.external_gateway_interface),
    )
    for field_name, interface in gateways:
        if not interface:
            continue
        try:
            validate_bridge(interface)
        except InterfaceLookupError as exc:
            missing.add(interface)
            problems.append(f"ovsInit.{field_name}: {exc}")

    uplink = config.ovs_init.gateway_interface
    if uplink and uplink not in missing:
        try:
            validate_mtu(config, uplink)
        except (InterfaceLookupError, MTUTooLargeError) as exc:
            problems.append(f"mtu: {exc}")

    for problem in problems:
        logger.warning("Host check failed: %s", problem)
    return problems
