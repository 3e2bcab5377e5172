"""
JSON/YAML helpers for plain mappings.

The compact JSON form produced by `to_canonical_json` is what the string
serializers in `objkit.objects` embed for nested containers, so it is
kept stable: insertion order, no whitespace, non-ASCII preserved.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from objkit.values import InvalidArgumentError, is_mapping


def _encode_extra(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_canonical_json(value: Any) -> str:
    """Compact JSON; bytes are decoded as UTF-8."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_encode_extra)


def _require_mapping(data: Any, source: str) -> Dict[str, Any]:
    if not is_mapping(data):
        raise InvalidArgumentError(
            f"Expected a mapping in {source}, got {type(data).__name__}"
        )
    return dict(data)


def mapping_to_json(obj: Dict[str, Any], indent: int | None = None) -> str:
    return json.dumps(obj, indent=indent, ensure_ascii=False)


def mapping_from_json(s: str) -> Dict[str, Any]:
    return _require_mapping(json.loads(s), "JSON document")


def mapping_to_yaml(obj: Dict[str, Any]) -> str:
    # sort_keys=False keeps enumeration order visible in the output
    return yaml.safe_dump(obj, sort_keys=False, allow_unicode=True)


def mapping_from_yaml(s: str) -> Dict[str, Any]:
    return _require_mapping(yaml.safe_load(s), "YAML document")


def load_mapping_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a mapping from a YAML or JSON file.

    JSON is parsed by the YAML loader, since JSON documents are valid YAML.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidArgumentError: If the document is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    return _require_mapping(data, str(path))
