from .config import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_MTU,
    ConfigLoader,
    OVNKubernetesConfig,
    OVSInit,
    ResolvedConfig,
    default_config,
    resolve_config,
    with_defaults,
)
from .network import (
    InterfaceLookupError,
    InterfaceNotFoundError,
    MTUTooLargeError,
    check_host,
    interface_mtu,
    validate_bridge,
    validate_mtu,
)
from .plugin import PLUGIN_NAME, PLUGIN_VERSION, OVNKubernetesPlugin, new_plugin

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_MTU",
    "ConfigLoader",
    "OVNKubernetesConfig",
    "OVSInit",
    "ResolvedConfig",
    "default_config",
    "resolve_config",
    "with_defaults",
    "InterfaceLookupError",
    "InterfaceNotFoundError",
    "MTUTooLargeError",
    "check_host",
    "interface_mtu",
    "validate_bridge",
    "validate_mtu",
    "PLUGIN_NAME",
    "PLUGIN_VERSION",
    "OVNKubernetesPlugin",
    "new_plugin",
]
