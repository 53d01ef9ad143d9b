from __future__ import annotations

import logging
from pathlib import Path

from core.configuration import ConfigError
from core.contracts import ComponentPlugin, ManifestGroup, PluginInfo, RenderParams

from .config import DEFAULT_CONFIG_PATH, ConfigLoader, OVNKubernetesConfig, default_config
from .manifests import get_manifests

logger = logging.getLogger("microshift.ovn_kubernetes")

PLUGIN_NAME = "ovn-kubernetes"
PLUGIN_VERSION = "0.1"


class OVNKubernetesPlugin(ComponentPlugin):
    def __init__(self, config_path: str | Path = DEFAULT_CONFIG_PATH) -> None:
        self._loader = ConfigLoader(config_path)

    @property
    def info(self) -> PluginInfo:
        return PluginInfo(
            name=PLUGIN_NAME,
            version=PLUGIN_VERSION,
            description="OVN-Kubernetes CNI: OVS bridges, geneve overlay and node daemons.",
        )

    @property
    def name(self) -> str:
        return PLUGIN_NAME

    @property
    def version(self) -> str:
        return PLUGIN_VERSION

    @property
    def config_path(self) -> Path:
        return self._loader.path

    def get_manifests(self, kind: str | None = None) -> tuple[ManifestGroup, ...]:
        return get_manifests(kind)

    def validate_config(self) -> bool:
        return True

    def get_render_params(self) -> RenderParams:
        config_path = str(self._loader.path)
        try:
            resolved = self._loader.load()
        except ConfigError as exc:
            # A broken config must not abort the deployment.
            logger.warning("Using default OVNKubernetes render params: %s", exc)
            return RenderParams(
                params=render_params_for(default_config()),
                source="fallback",
                config_path=config_path,
                error=str(exc),
            )

        return RenderParams(
            params=render_params_for(resolved.config),
            source=resolved.source,
            config_path=config_path,
        )


def render_params_for(config: OVNKubernetesConfig) -> dict[str, str]:
    params = {
        "mtu": str(config.mtu),
        "disableOVSInit": "true" if config.ovs_init.disable_ovs_init else "false",
    }
    if config.ovs_init.gateway_interface:
        params["gatewayInterface"] = config.ovs_init.gateway_interface
    if config.ovs_init.external_gateway_interface:
        params["externalGatewayInterface"] = config.ovs_init.external_gateway_interface
    return params


def new_plugin(config_path: str | Path = DEFAULT_CONFIG_PATH) -> OVNKubernetesPlugin:
    return OVNKubernetesPlugin(config_path=config_path)
