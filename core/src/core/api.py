from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from core.contracts import ComponentPlugin, ManifestGroup, PluginRegistry, RenderParams

logger = logging.getLogger("microshift.components")


@dataclass(frozen=True, slots=True)
class ComponentDescription:
    """What the host needs to deploy one component."""

    name: str
    version: str
    manifests: tuple[ManifestGroup, ...]
    render_params: RenderParams
    valid: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "valid": self.valid,
            "manifests": {group.category: list(group.paths) for group in self.manifests},
            "render_params": {
                "source": self.render_params.source,
                "config_path": self.render_params.config_path,
                "error": self.render_params.error,
                "params": dict(self.render_params.params),
            },
        }


def describe_component(plugin: ComponentPlugin, *, kind: str | None = None) -> ComponentDescription:
    valid = plugin.validate_config()
    if not valid:
        logger.warning("Component %s reported invalid config", plugin.name)

    render_params = plugin.get_render_params()
    if render_params.used_fallback:
        logger.warning(
            "Component %s fell back to default render params: %s",
            plugin.name,
            render_params.error,
        )

    return ComponentDescription(
        name=plugin.name,
        version=plugin.version,
        manifests=plugin.get_manifests(kind),
        render_params=render_params,
        valid=valid,
    )


def describe_registry(
    registry: PluginRegistry, *, kind: str | None = None
) -> list[ComponentDescription]:
    return [describe_component(registry.get(info.name), kind=kind) for info in registry.list()]


def manifest_paths(descriptions: list[ComponentDescription]) -> list[str]:
    """Flatten manifest paths of all components, keeping group order."""
    paths: list[str] = []
    for description in descriptions:
        for group in description.manifests:
            paths.extend(group.paths)
    return paths
