from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal

ParamsSource = Literal["file", "default", "fallback"]


@dataclass(frozen=True, slots=True)
class RenderParams:
    """
    Public render-parameter contract.

    `source` tells the host where the values came from:
    - "file": decoded from the component config file
    - "default": the config file was absent, defaults were synthesized
    - "fallback": the config file was unusable and defaults replaced it
    """

    params: Mapping[str, str] = field(default_factory=dict)
    source: ParamsSource = "default"
    config_path: str | None = None

    # Message of the swallowed error, only set for "fallback"
    error: str | None = None

    @property
    def used_fallback(self) -> bool:
        return self.source == "fallback"
