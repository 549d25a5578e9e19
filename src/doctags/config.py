from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from pathlib import Path
from typing import TypeAlias
import tomllib

from loguru import logger

DEFAULT_CONFIG_NAME = "doctags.toml"

TomlScalar: TypeAlias = str | int | float | bool | None | date | datetime | time
TomlValue: TypeAlias = TomlScalar | list["TomlValue"] | dict[str, "TomlValue"]
TomlTable: TypeAlias = dict[str, TomlValue]


@dataclass(frozen=True)
class TagPolicy:
    method_type_parameters: bool = True
    qualified_exception_names: bool = False
    stub_placeholder: str = ""


def _load_toml(path: Path) -> TomlTable:
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("could not read {}: {}", path, exc)
        return {}
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        logger.warning("ignoring malformed config {}: {}", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_config(root: Path | None = None, config_path: Path | None = None) -> TomlTable:
    if config_path is None:
        base = root if root is not None else Path.cwd()
        config_path = base / DEFAULT_CONFIG_NAME
    return _load_toml(config_path)


def tag_defaults(
    root: Path | None = None, config_path: Path | None = None
) -> TomlTable:
    data = load_config(root=root, config_path=config_path)
    section = data.get("tags", {})
    return section if isinstance(section, dict) else {}


def _as_bool(value: TomlValue, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return default


def merge_payload(payload: TomlTable, defaults: TomlTable) -> TomlTable:
    merged = dict(defaults)
    for key, value in payload.items():
        if value is None:
            continue
        merged[key] = value
    return merged


def policy_from_section(section: TomlTable | None) -> TagPolicy:
    if not isinstance(section, dict):
        return TagPolicy()
    placeholder = section.get("stub_placeholder")
    return TagPolicy(
        method_type_parameters=_as_bool(section.get("method_type_parameters"), True),
        qualified_exception_names=_as_bool(
            section.get("qualified_exception_names"), False
        ),
        stub_placeholder=placeholder if isinstance(placeholder, str) else "",
    )


def tag_policy(
    root: Path | None = None,
    config_path: Path | None = None,
    overrides: TomlTable | None = None,
) -> TagPolicy:
    section = tag_defaults(root=root, config_path=config_path)
    if overrides:
        section = merge_payload(overrides, section)
    return policy_from_section(section)
