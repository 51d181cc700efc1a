"""Serialize site metadata to JSON or YAML and read it back."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from .models import SiteMetadata, SiteMetadataError

logger = logging.getLogger(__name__)

FORMATS = ("json", "yaml")
SUFFIX_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def _check_format(fmt: str) -> str:
    fmt = fmt.lower()
    if fmt not in FORMATS:
        raise SiteMetadataError(f"Unsupported format: {fmt} (expected one of {', '.join(FORMATS)})")
    return fmt


def format_for_path(path: str | Path) -> str:
    suffix = Path(path).suffix.lower()
    if suffix not in SUFFIX_FORMATS:
        raise SiteMetadataError(f"Cannot infer metadata format from file name: {path}")
    return SUFFIX_FORMATS[suffix]


def dump(metadata: SiteMetadata, fmt: str = "json") -> str:
    fmt = _check_format(fmt)
    data = metadata.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)


def load(text: str, fmt: str = "json") -> SiteMetadata:
    fmt = _check_format(fmt)
    try:
        if fmt == "json":
            raw = json.loads(text)
        else:
            raw = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SiteMetadataError(f"Invalid {fmt} metadata: {e}") from e
    return SiteMetadata.from_dict(raw)


def load_file(path: str | Path) -> SiteMetadata:
    path = Path(path)
    fmt = format_for_path(path)
    if not path.exists():
        raise SiteMetadataError(f"Missing metadata file: {path}")
    logger.debug(f"Loading {fmt} metadata from {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise SiteMetadataError(f"Metadata file {path} is not valid UTF-8: {e}") from e
    return load(text, fmt)


def write_file(metadata: SiteMetadata, path: str | Path) -> Path:
    path = Path(path)
    fmt = format_for_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(dump(metadata, fmt))
    logger.info(f"Wrote {fmt} metadata to {path}")
    return path
