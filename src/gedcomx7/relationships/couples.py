from __future__ import annotations

from typing import Any, Dict, Optional

from gedcomx7.builders.facts import fact_value
from gedcomx7.builders.person import ensure_person
from gedcomx7.builders.sources import source_citation
from gedcomx7.gedcom7.node import G7Node, g7
from gedcomx7.gedcomx.index import resource_id
from gedcomx7.relationships.families import find_or_create_family, is_wife
from gedcomx7.vocab.facts import FactScope
from gedcomx7.vocab.terms import COUPLE, EXID_RELATIONSHIP, PARENT_CHILD


def build_couple(ctx, relationship: Dict[str, Any]) -> Optional[G7Node]:
    """
    Create or complete the FAM record for one Couple relationship.

    Missing persons get stub INDI records. ``person1`` is the husband unless
    the known sexes say otherwise.
    """
    first_id = resource_id(relationship.get("person1"))
    second_id = resource_id(relationship.get("person2"))
    if not first_id or not second_id:
        ctx.report(f"Couple relationship {relationship.get('id')} is missing a participant; skipped")
        return None

    first = ensure_person(ctx, first_id)
    second = ensure_person(ctx, second_id)

    if is_wife(first) is True or is_wife(second) is False:
        husband, wife = second, first
    else:
        husband, wife = first, second

    family = find_or_create_family(ctx, husband, wife)

    if relationship.get("id"):
        family.add(g7("EXID", relationship["id"], g7("TYPE", EXID_RELATIONSHIP)))
    for fact in relationship.get("facts") or []:
        family.add(fact_value(ctx, fact, FactScope.COUPLE))
    for ref in relationship.get("sources") or []:
        family.add(source_citation(ctx, ref))

    return family


def apply_couples(ctx) -> int:
    """
    Relationship pass: one FAM per Couple relationship.

    ParentChild relationships are left to the numbering resolver; they and
    any other relationship types are only counted here.
    """
    built = 0
    parent_child = 0
    other = 0
    for relationship in ctx.graph.relationships:
        rtype = relationship.get("type")
        if rtype == COUPLE:
            if build_couple(ctx, relationship) is not None:
                built += 1
        elif rtype == PARENT_CHILD:
            parent_child += 1
        else:
            other += 1

    if parent_child:
        ctx.logger.info("%d parent-child relationships not consumed", parent_child)
    if other:
        ctx.logger.info("%d relationships of other types not consumed", other)
    ctx.stats["couples"] = built
    ctx.stats["parent_child_skipped"] = parent_child
    ctx.stats["relationships_skipped"] = parent_child + other
    return built
