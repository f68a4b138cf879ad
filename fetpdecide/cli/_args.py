from __future__ import annotations

import argparse
from typing import Any

from fetpdecide.core.domain.attributes import CANONICAL_ATTRIBUTES


def add_attribute_args(parser: argparse.ArgumentParser) -> None:
    for name in CANONICAL_ATTRIBUTES:
        flag = "--" + name.replace("_", "-")
        parser.add_argument(flag, dest=name, default=None, help=f"Selected level for {name}")


def form_from_args(args: argparse.Namespace) -> dict[str, Any]:
    return {name: getattr(args, name, None) for name in CANONICAL_ATTRIBUTES}


def format_configuration(config: dict[str, str]) -> str:
    return " ".join(f"{name}={level}" for name, level in config.items())
