from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.configuration import (
    ConfigParseError,
    ConfigReadError,
    format_validation_error,
    load_yaml,
)

logger = logging.getLogger("microshift.ovn_kubernetes.config")

CONFIG_FILE_NAME = "ovn.yaml"
DEFAULT_CONFIG_PATH = Path("/etc/microshift") / CONFIG_FILE_NAME
DEFAULT_MTU = 1400
MAX_MTU = 2**32 - 1

ConfigSource = Literal["file", "default"]


class OVSInit(BaseModel):
    """Settings for microshift-ovs-init.service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # OVS bridge "br-ex" must be configured manually when this is true.
    disable_ovs_init: bool = Field(default=False, alias="disableOVSInit", strict=True)
    # Uplink interface for OVS bridge "br-ex"
    gateway_interface: str | None = Field(default=None, alias="gatewayInterface", strict=True)
    # Uplink interface for OVS bridge "br-ex1"
    external_gateway_interface: str | None = Field(
        default=None, alias="externalGatewayInterface", strict=True
    )

    # An empty YAML value decodes to null; treat it as unset.
    @field_validator("disable_ovs_init", mode="before")
    @classmethod
    def _null_as_false(cls, value: Any) -> Any:
        return False if value is None else value


class OVNKubernetesConfig(BaseModel):
    """
    Effective OVN-Kubernetes settings.

    The zero value (no arguments) leaves every field unset, `mtu` included.
    Use `with_defaults()` to get the documented defaults.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    ovs_init: OVSInit = Field(default_factory=OVSInit, alias="ovsInit")
    # MTU of the geneve tunnel interface, 100 bytes smaller than the uplink MTU.
    mtu: int = Field(default=0, ge=0, le=MAX_MTU, strict=True)

    @field_validator("ovs_init", mode="before")
    @classmethod
    def _null_as_zero_ovs_init(cls, value: Any) -> Any:
        return OVSInit() if value is None else value

    @field_validator("mtu", mode="before")
    @classmethod
    def _null_as_zero_mtu(cls, value: Any) -> Any:
        return 0 if value is None else value


@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    config: OVNKubernetesConfig
    source: ConfigSource
    path: Path


def with_defaults(config: OVNKubernetesConfig) -> OVNKubernetesConfig:
    ovs_init = config.ovs_init.model_copy(update={"disable_ovs_init": False})
    return config.model_copy(update={"ovs_init": ovs_init, "mtu": DEFAULT_MTU})


def default_config() -> OVNKubernetesConfig:
    return with_defaults(OVNKubernetesConfig())


def parse_config(payload: Mapping[str, Any], *, source: str = "<mapping>") -> OVNKubernetesConfig:
    try:
        # File keys are the camelCase aliases only.
        return OVNKubernetesConfig.model_validate(dict(payload), by_alias=True, by_name=False)
    except ValidationError as exc:
        raise ConfigParseError(
            f"parsing OVNKubernetes config {source}: {format_validation_error('config', exc)}"
        ) from exc


class ConfigLoader:
    """
    Resolve the OVN-Kubernetes config from a file, or defaults when it is absent.

    Defaults only apply when the file does not exist. A file that parses is
    returned as decoded, so fields it omits keep their zero value (`mtu == 0`).
    A file that exists but cannot be read or parsed is an error, never a
    partial merge with defaults.
    """

    def __init__(self, path: str | Path = DEFAULT_CONFIG_PATH) -> None:
        self.path = Path(path)

    def load(self) -> ResolvedConfig:
        try:
            self.path.stat()
        except FileNotFoundError:
            logger.info("OVNKubernetes config file %s not found, assuming default values", self.path)
            return ResolvedConfig(config=default_config(), source="default", path=self.path)
        except OSError as exc:
            raise ConfigReadError(
                f"failed to get OVNKubernetes config file {self.path}: {exc}"
            ) from exc

        try:
            payload = load_yaml(self.path)
        except OSError as exc:
            raise ConfigReadError(
                f"getting OVNKubernetes config from {self.path}: {exc}"
            ) from exc

        config = parse_config(payload, source=str(self.path))
        logger.info("Got OVNKubernetes config from file %s", self.path)
        return ResolvedConfig(config=config, source="file", path=self.path)

    def resolve(self) -> OVNKubernetesConfig:
        return self.load().config


def resolve_config(path: str | Path = DEFAULT_CONFIG_PATH) -> OVNKubernetesConfig:
    return ConfigLoader(path).resolve()
