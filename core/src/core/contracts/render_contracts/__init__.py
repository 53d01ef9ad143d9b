from .manifest_group import ManifestGroup
from .render_params import ParamsSource, RenderParams

__all__ = [
    "ManifestGroup",
    "ParamsSource",
    "RenderParams",
]
