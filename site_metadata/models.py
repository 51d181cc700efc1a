from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

AUTHOR_KEYS = ("name", "email", "url")
SITE_KEYS = ("title", "url", "language", "description", "author", "social")


class SiteMetadataError(ValueError):
    """Raised when a metadata record is malformed or cannot be read."""


def _require_str(raw: Mapping[str, Any], key: str, where: str) -> str:
    if key not in raw:
        raise SiteMetadataError(f"Missing metadata key: {where}{key}")
    value = raw[key]
    if not isinstance(value, str):
        raise SiteMetadataError(
            f"Metadata key {where}{key} must be a string, got {type(value).__name__}"
        )
    return value


def _require_mapping(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    if key not in raw:
        raise SiteMetadataError(f"Missing metadata key: {key}")
    value = raw[key]
    if not isinstance(value, Mapping):
        raise SiteMetadataError(
            f"Metadata key {key} must be a mapping, got {type(value).__name__}"
        )
    return value


def _reject_unknown(raw: Mapping[str, Any], allowed: tuple[str, ...], where: str) -> None:
    unknown = [k for k in raw if k not in allowed]
    if unknown:
        names = ", ".join(f"{where}{k}" for k in unknown)
        raise SiteMetadataError(f"Unknown metadata keys: {names}")


@dataclass(frozen=True)
class Author:
    name: str
    email: str
    url: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Author":
        _reject_unknown(raw, AUTHOR_KEYS, "author.")
        return cls(
            name=_require_str(raw, "name", "author."),
            email=_require_str(raw, "email", "author."),
            url=_require_str(raw, "url", "author."),
        )

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email, "url": self.url}


@dataclass(frozen=True)
class SiteMetadata:
    """
    Read-only description of the site: title, canonical url, language,
    tagline, author and social profiles.

    ``social`` maps a platform name to a profile url. The set of platforms
    is open, and the mapping is wrapped read-only so the record cannot be
    changed after it is built.
    """

    title: str
    url: str
    language: str
    description: str
    author: Author
    social: Mapping[str, str]

    def __post_init__(self):
        if not isinstance(self.social, MappingProxyType):
            object.__setattr__(self, "social", MappingProxyType(dict(self.social)))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SiteMetadata":
        """Build a record from its nested plain-mapping form."""
        if not isinstance(raw, Mapping):
            raise SiteMetadataError(
                f"Metadata record must be a mapping, got {type(raw).__name__}"
            )
        _reject_unknown(raw, SITE_KEYS, "")

        social_raw = _require_mapping(raw, "social")
        social = {}
        for platform in social_raw:
            if not isinstance(platform, str):
                raise SiteMetadataError(f"Social platform names must be strings, got {platform!r}")
            social[platform] = _require_str(social_raw, platform, "social.")

        return cls(
            title=_require_str(raw, "title", ""),
            url=_require_str(raw, "url", ""),
            language=_require_str(raw, "language", ""),
            description=_require_str(raw, "description", ""),
            author=Author.from_dict(_require_mapping(raw, "author")),
            social=social,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "language": self.language,
            "description": self.description,
            "author": self.author.to_dict(),
            "social": dict(self.social),
        }

    def social_links(self) -> list[tuple[str, str]]:
        return list(self.social.items())

    def lookup(self, path: str) -> Any:
        """Resolve a dotted path such as ``social.github`` or ``author``."""
        node: Any = self.to_dict()
        for part in path.split("."):
            if not isinstance(node, dict) or part not in node:
                raise SiteMetadataError(f"Unknown metadata field: {path}")
            node = node[part]
        return node
