from __future__ import annotations

import logging

import pytest

from core.api import describe_component, describe_registry, manifest_paths
from core.contracts import ManifestGroup, PluginInfo, RenderParams
from core.orchestration.registry import DictPluginRegistry
from core.testkit.dummies import DummyPlugin


class _FallbackPlugin(DummyPlugin):
    def get_render_params(self) -> RenderParams:
        return RenderParams(
            params={"replicas": "1"},
            source="fallback",
            config_path="/tmp/broken.yaml",
            error="parsing config: boom",
        )


def test_describe_component_collects_plugin_surface() -> None:
    description = describe_component(DummyPlugin())

    assert description.name == "dummy"
    assert description.version == "0.0.1"
    assert description.valid is True
    assert [group.category for group in description.manifests] == ["namespace", "deployment"]
    assert description.render_params.params == {"replicas": "1"}


def test_describe_component_passes_kind_filter() -> None:
    description = describe_component(DummyPlugin(), kind="deployment")

    assert description.manifests == (
        ManifestGroup(category="deployment", paths=("components/dummy/deployment.yaml",)),
    )


def test_describe_component_logs_invalid_config_and_fallback(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="microshift.components")

    description = describe_component(_FallbackPlugin(name="broken", valid=False))

    assert description.valid is False
    assert description.render_params.used_fallback
    messages = [record.getMessage() for record in caplog.records]
    assert any("reported invalid config" in message for message in messages)
    assert any("parsing config: boom" in message for message in messages)


def test_describe_registry_covers_every_plugin() -> None:
    registry = DictPluginRegistry()
    registry.register(DummyPlugin("first"))
    registry.register(DummyPlugin("second"))

    descriptions = describe_registry(registry)

    assert [description.name for description in descriptions] == ["first", "second"]
    assert manifest_paths(descriptions) == [
        "components/dummy/namespace.yaml",
        "components/dummy/deployment.yaml",
        "components/dummy/namespace.yaml",
        "components/dummy/deployment.yaml",
    ]


def test_component_description_to_dict_is_plain_data() -> None:
    payload = describe_component(_FallbackPlugin()).to_dict()

    assert payload["manifests"] == {
        "namespace": ["components/dummy/namespace.yaml"],
        "deployment": ["components/dummy/deployment.yaml"],
    }
    assert payload["render_params"] == {
        "source": "fallback",
        "config_path": "/tmp/broken.yaml",
        "error": "parsing config: boom",
        "params": {"replicas": "1"},
    }


def test_manifest_group_requires_category() -> None:
    with pytest.raises(ValueError):
        ManifestGroup(category="", paths=())


def test_manifest_group_stores_paths_as_tuple() -> None:
    group = ManifestGroup(category="role", paths=["a.yaml", "b.yaml"])

    assert group.paths == ("a.yaml", "b.yaml")


def test_plugin_info_is_frozen() -> None:
    info = PluginInfo(name="x", version="1")

    with pytest.raises(AttributeError):
        info.name = "y"  # type: ignore[misc]
