from __future__ import annotations

from core.contracts import ManifestGroup

_ASSETS_DIR = "components/ovn"

# Apply order matters: namespace and RBAC before the daemonsets that use them.
MANIFESTS: tuple[ManifestGroup, ...] = (
    ManifestGroup("namespace", (f"{_ASSETS_DIR}/namespace.yaml",)),
    ManifestGroup(
        "serviceaccount",
        (
            f"{_ASSETS_DIR}/node/serviceaccount.yaml",
            f"{_ASSETS_DIR}/master/serviceaccount.yaml",
        ),
    ),
    ManifestGroup("role", (f"{_ASSETS_DIR}/role.yaml",)),
    ManifestGroup("rolebinding", (f"{_ASSETS_DIR}/rolebinding.yaml",)),
    ManifestGroup("clusterrole", (f"{_ASSETS_DIR}/clusterrole.yaml",)),
    ManifestGroup("clusterrolebinding", (f"{_ASSETS_DIR}/clusterrolebinding.yaml",)),
    ManifestGroup("configmap", (f"{_ASSETS_DIR}/configmap.yaml",)),
    ManifestGroup(
        "daemonset",
        (
            f"{_ASSETS_DIR}/master/daemonset.yaml",
            f"{_ASSETS_DIR}/node/daemonset.yaml",
        ),
    ),
)


def get_manifests(kind: str | None = None) -> tuple[ManifestGroup, ...]:
    if kind is None:
        return MANIFESTS
    return tuple(group for group in MANIFESTS if group.category == kind)
