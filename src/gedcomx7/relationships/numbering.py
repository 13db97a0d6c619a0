"""
Generation-number resolver.

Persons may carry two kinds of position keys (collected from
``display.ascendancyNumber`` / ``display.descendancyNumber``):

* ahnentafel ``n``: the father is at ``2n`` and the mother at ``2n+1``
  when those keys exist;
* d'Aboville ``prefix-S[k]`` (k-th spouse of ``prefix``) and
  ``prefix.k`` (k-th child of ``prefix``, in birth order).

Keys are resolved shortest first, then lexicographically, so every key is
handled after the shorter key it derives from.
"""

from __future__ import annotations

import re
from typing import List, Optional

from gedcomx7.core.exceptions import NumberingError
from gedcomx7.gedcom7.node import G7Node
from gedcomx7.relationships.families import (
    HUSB,
    WIFE,
    append_child,
    find_or_create_family,
    order_spouses,
    parent_role,
    place_child,
)

AHNENTAFEL = re.compile(r"^[0-9]+$")
DABOVILLE = re.compile(r"^(?P<prefix>.+)(?:-(?P<spouse>S[0-9]*)|\.(?P<child>[0-9]+))$")


def resolution_order(keys) -> List[str]:
    return sorted(keys, key=lambda k: (len(k), k))


def _spouse_ordinal(suffix: str) -> int:
    digits = suffix[1:]
    return int(digits) if digits else 1


# ---------------------------------------------------------------------------
# One key per scheme
# ---------------------------------------------------------------------------

def _resolve_ahnentafel(ctx, key: str, person: G7Node) -> Optional[G7Node]:
    n = int(key)
    if n < 1:
        ctx.report(f"Ahnentafel number {key} is not positive; skipped")
        return None

    tables = ctx.numbering
    father_key, mother_key = str(2 * n), str(2 * n + 1)
    father = tables.person_at.get(father_key)
    mother = tables.person_at.get(mother_key)
    if father is None and mother is None:
        return None

    family = find_or_create_family(ctx, father, mother)
    if append_child(family, person):
        ctx.bump("children_placed")
    tables.family_at.setdefault(father_key, family)
    tables.family_at.setdefault(mother_key, family)
    return family


FIRST_SPOUSE_SUFFIXES = ("-S", "-S1")


def _resolve_spouse(ctx, key: str, prefix: str, anchor: G7Node, person: G7Node, ordinal: int) -> G7Node:
    tables = ctx.numbering
    family = tables.family_at.get(key)
    if family is not None:
        return family

    husband, wife = order_spouses(ctx, anchor, person, key)
    family = find_or_create_family(ctx, husband, wife)

    tables.family_at[key] = family
    if ordinal == 1:
        # The first spouse's family is the default family of ``prefix``.
        tables.family_at.setdefault(prefix, family)
    return family


def _default_family(ctx, prefix: str, anchor: G7Node) -> G7Node:
    """
    The family children of ``prefix`` belong to.

    ``prefix-S1`` sorts after ``prefix.k``, so the first spouse's family is
    resolved here on demand; a single-parent family is used only when no
    first spouse is numbered.
    """
    tables = ctx.numbering
    family = tables.family_at.get(prefix)
    if family is not None:
        return family

    for suffix in FIRST_SPOUSE_SUFFIXES:
        spouse = tables.person_at.get(prefix + suffix)
        if spouse is not None and spouse is not anchor:
            return _resolve_spouse(ctx, prefix + suffix, prefix, anchor, spouse, 1)

    role = parent_role(ctx, anchor, prefix)
    family = find_or_create_family(
        ctx,
        anchor if role == HUSB else None,
        anchor if role == WIFE else None,
    )
    tables.family_at[prefix] = family
    return family


def _resolve_child(ctx, key: str, prefix: str, anchor: G7Node, person: G7Node, position: int) -> Optional[G7Node]:
    if position < 1:
        ctx.report(f"Child number {key} has position {position}; skipped")
        return None

    family = _default_family(ctx, prefix, anchor)
    if place_child(family, person, position):
        ctx.bump("children_placed")
    return family


def resolve_key(ctx, key: str) -> Optional[G7Node]:
    """
    Apply one generation number and return the family it touched.

    Raises NumberingError when a d'Aboville key derives from a position that
    has no person; nothing is modified in that case.
    """
    tables = ctx.numbering
    person = tables.person_at[key]

    if AHNENTAFEL.match(key):
        return _resolve_ahnentafel(ctx, key, person)

    m = DABOVILLE.match(key)
    if not m:
        ctx.report(f"Unrecognized generation number {key!r}; skipped")
        return None

    prefix = m.group("prefix")
    anchor = tables.person_at.get(prefix)
    if anchor is None:
        raise NumberingError(key, prefix)
    if anchor is person:
        ctx.report(f"Generation number {key} refers to its own person; skipped")
        return None

    if m.group("spouse") is not None:
        return _resolve_spouse(ctx, key, prefix, anchor, person, _spouse_ordinal(m.group("spouse")))
    return _resolve_child(ctx, key, prefix, anchor, person, int(m.group("child")))


def resolve_numbering(ctx) -> int:
    """
    Resolve every registered generation number in dependency order.

    NumberingError propagates to the caller: an inconsistent numbering table
    cannot be repaired here.
    """
    keys = resolution_order(ctx.numbering.person_at)
    ctx.logger.debug("Resolving %d generation numbers", len(keys))
    for key in keys:
        resolve_key(ctx, key)
    ctx.stats["generation_numbers"] = len(keys)
    return len(keys)
