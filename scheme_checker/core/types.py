"""Shared types for scheme-tool: ColorScheme, DiffEntry, SchemeDiff."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NamedTuple

INHERIT = 'inherit'  # reserved property key for baseAttributes references

PropertyMap = Mapping[str, str]


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ColorScheme:
    """A parsed colour scheme file.

    attributes: attribute name -> property mapping, either {'inherit': name}
    or lower-cased style properties (foreground, background, ...).
    colors: colour name -> hex string, possibly empty.
    """

    attributes: Mapping[str, PropertyMap] = field(default_factory=dict)
    colors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Detached read-only copies of the caller's dicts
        attributes = {name: _frozen(props) for name, props in self.attributes.items()}
        object.__setattr__(self, 'attributes', MappingProxyType(attributes))
        object.__setattr__(self, 'colors', _frozen(self.colors))


class DiffEntry(NamedTuple):
    """One classified attribute: value in the candidate and in the baseline."""

    key: str
    candidate: PropertyMap | None
    baseline: PropertyMap | None


@dataclass(frozen=True)
class SchemeDiff:
    """Attribute keys that differ between a baseline and a candidate scheme."""

    changed: tuple[DiffEntry, ...] = ()
    removed: tuple[DiffEntry, ...] = ()  # baseline only
    added: tuple[DiffEntry, ...] = ()  # candidate only

    @property
    def is_empty(self) -> bool:
        return not (self.changed or self.removed or self.added)
