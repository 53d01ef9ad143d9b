from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ManifestGroup:
    """Manifests of one category, applied together and in order."""

    category: str
    paths: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.category:
            raise ValueError("category must be a non-empty string")
        # Accept any sequence but store an immutable tuple.
        object.__setattr__(self, "paths", tuple(self.paths))
