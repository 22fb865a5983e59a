"""Attribute diff between a baseline and a candidate colour scheme.

Every key in either mapping is classified once:
  both present, unequal  -> changed
  baseline only          -> removed
  candidate only         -> added
  both present, equal    -> dropped
"""

from collections.abc import Mapping

from scheme_checker.core.types import ColorScheme, DiffEntry, PropertyMap, SchemeDiff


def diff_attributes(
    baseline: Mapping[str, PropertyMap],
    candidate: Mapping[str, PropertyMap],
) -> SchemeDiff:
    """Classify the union of both key sets into changed, removed and added."""
    # Candidate order first, then keys only the baseline has
    all_keys = dict.fromkeys([*candidate, *baseline])

    changed, removed, added = [], [], []
    for key in all_keys:
        entry = DiffEntry(key, candidate.get(key), baseline.get(key))
        if entry.candidate is not None and entry.baseline is not None:
            if entry.candidate != entry.baseline:
                changed.append(entry)
        elif entry.baseline is not None:
            removed.append(entry)
        elif entry.candidate is not None:
            added.append(entry)

    return SchemeDiff(changed=tuple(changed), removed=tuple(removed), added=tuple(added))


def diff_schemes(baseline: ColorScheme, candidate: ColorScheme) -> SchemeDiff:
    return diff_attributes(baseline.attributes, candidate.attributes)
