from __future__ import annotations

from core.contracts import ComponentPlugin, ManifestGroup, PluginInfo, RenderParams


class DummyPlugin(ComponentPlugin):
    def __init__(self, name: str = "dummy", *, valid: bool = True) -> None:
        self._name = name
        self._valid = valid

    @property
    def info(self) -> PluginInfo:
        return PluginInfo(name=self._name, version="0.0.1", description="Dummy component")

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> str:
        return self.info.version

    def get_manifests(self, kind: str | None = None) -> tuple[ManifestGroup, ...]:
        groups = (
            ManifestGroup(category="namespace", paths=("components/dummy/namespace.yaml",)),
            ManifestGroup(category="deployment", paths=("components/dummy/deployment.yaml",)),
        )
        if kind is None:
            return groups
        return tuple(group for group in groups if group.category == kind)

    def validate_config(self) -> bool:
        return self._valid

    def get_render_params(self) -> RenderParams:
        return RenderParams(params={"replicas": "1"}, source="default")
