from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from core.contracts.render_contracts.manifest_group import ManifestGroup
from core.contracts.render_contracts.render_params import RenderParams


@dataclass(frozen=True, slots=True)
class PluginInfo:
    name: str
    version: str
    description: str | None = None


@runtime_checkable
class ComponentPlugin(Protocol):
    """
    Component plugin contract.

    Plugins describe one deployable component (OVN-Kubernetes, etc.): which
    manifests the host applies and which values it substitutes into them.
    `name` and `version` are part of the host's component registry contract.
    """

    @property
    def info(self) -> PluginInfo: ...

    @property
    def name(self) -> str: ...

    @property
    def version(self) -> str: ...

    def get_manifests(self, kind: str | None = None) -> tuple[ManifestGroup, ...]:
        """
        Return manifest groups in apply order.

        `kind` narrows the listing to the group with that category.
        """
        ...

    def validate_config(self) -> bool: ...

    def get_render_params(self) -> RenderParams:
        """Resolve template parameters. Must not raise on bad config."""
        ...
