from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from core.api import describe_registry, manifest_paths
from core.configuration import ConfigError, dump_yaml
from core.orchestration.registry import DictPluginRegistry
from plugins.ovn_kubernetes import DEFAULT_CONFIG_PATH, check_host, new_plugin, resolve_config

_ENV_OVN_CONFIG = "MICROSHIFT_OVN_CONFIG"


def _resolve_config_path() -> Path:
    env_value = os.environ.get(_ENV_OVN_CONFIG)
    return Path(env_value) if env_value else DEFAULT_CONFIG_PATH


def build_registry(config_path: Path) -> DictPluginRegistry:
    registry = DictPluginRegistry()
    registry.register(new_plugin(config_path=config_path))
    return registry


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show manifests and render params of MicroShift component plugins."
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help=f"OVN config path (default: ${_ENV_OVN_CONFIG} or {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--kind",
        default=None,
        help="Only list manifests of this category (e.g. daemonset)",
    )
    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print only the manifest paths, one per line, in apply order",
    )
    parser.add_argument(
        "--check-host",
        action="store_true",
        help="Check gateway interfaces and MTU headroom on this host",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config_path = args.config_path or _resolve_config_path()

    registry = build_registry(config_path)
    descriptions = describe_registry(registry, kind=args.kind)
    if args.paths:
        for path in manifest_paths(descriptions):
            print(path)
    else:
        dump_yaml([description.to_dict() for description in descriptions], sys.stdout)

    if not args.check_host:
        return 0

    # Host checks need the real config; a broken file is fatal here.
    try:
        problems = check_host(resolve_config(config_path))
    except ConfigError as exc:
        print(f"host check failed: {exc}", file=sys.stderr)
        return 1
    for problem in problems:
        print(problem, file=sys.stderr)
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main())
