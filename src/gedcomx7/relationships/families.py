from __future__ import annotations

from typing import Optional, Tuple

from gedcomx7.gedcom7.node import G7Node, VOID, g7
from gedcomx7.gedcom7.registry import couple_key

HUSB = "HUSB"
WIFE = "WIFE"


# ---------------------------------------------------------------------------
# Sex heuristic
# ---------------------------------------------------------------------------

def is_wife(person: G7Node) -> Optional[bool]:
    """
    Guess whether ``person`` fills the WIFE role of a family.

    An explicit SEX F/M decides; otherwise an existing WIFE/HUSB role in one
    of the person's FAMS families; otherwise None (unknown).
    """
    for sex in person.find_children("SEX"):
        if sex.payload == "F":
            return True
        if sex.payload == "M":
            return False

    for fams in person.find_children("FAMS"):
        family = fams.reference
        if family is None:
            continue
        if family.points_to(WIFE, person):
            return True
        if family.points_to(HUSB, person):
            return False
    return None


def _fallback_anchor_is_wife(ctx) -> bool:
    role = str(ctx.config.numbering.get("ambiguous_anchor_role", HUSB)).upper()
    return role == WIFE


def _report_ambiguous(ctx, message: str) -> None:
    if ctx.config.numbering.get("report_ambiguous_sex", True):
        ctx.report(message)
    else:
        ctx.logger.debug(message)


def order_spouses(ctx, anchor: G7Node, partner: G7Node, label: str) -> Tuple[G7Node, G7Node]:
    """
    Return ``(husband, wife)`` for a numbered person and their spouse.

    The partner's own sex wins, then the complement of the anchor's; when
    both are unknown the anchor takes the configured fallback role.
    """
    partner_wife = is_wife(partner)
    if partner_wife is None:
        anchor_wife = is_wife(anchor)
        if anchor_wife is not None:
            partner_wife = not anchor_wife
    if partner_wife is None:
        anchor_wife = _fallback_anchor_is_wife(ctx)
        partner_wife = not anchor_wife
        _report_ambiguous(
            ctx,
            f"Sex unknown for both spouses at {label}; assuming {anchor.source_id} is "
            f"{WIFE if anchor_wife else HUSB}",
        )
    return (anchor, partner) if partner_wife else (partner, anchor)


def parent_role(ctx, parent: G7Node, label: str) -> str:
    """HUSB or WIFE for a parent whose partner is unknown."""
    wife = is_wife(parent)
    if wife is None:
        wife = _fallback_anchor_is_wife(ctx)
        _report_ambiguous(
            ctx,
            f"Sex unknown for parent {parent.source_id} at {label}; "
            f"assuming {WIFE if wife else HUSB}",
        )
    return WIFE if wife else HUSB


# ---------------------------------------------------------------------------
# Family records
# ---------------------------------------------------------------------------

def find_or_create_family(ctx, husband: Optional[G7Node], wife: Optional[G7Node]) -> G7Node:
    """
    The FAM record for this couple (either side may be unknown).

    The key ignores roles, so the same two people always share one record.
    New families get FAMS pointers on each spouse.
    """
    key = couple_key(
        husband.source_id if husband is not None else None,
        wife.source_id if wife is not None else None,
    )

    def factory() -> G7Node:
        family = g7(
            "FAM",
            None,
            g7(HUSB, husband) if husband is not None else None,
            g7(WIFE, wife) if wife is not None else None,
        )
        for spouse in (husband, wife):
            if spouse is not None:
                spouse.add(g7("FAMS", family))
        ctx.bump("families")
        return family

    return ctx.registry.resolve(key, factory)


def has_child(family: G7Node, person: G7Node) -> bool:
    return family.points_to("CHIL", person)


def link_child(family: G7Node, person: G7Node) -> None:
    """Add the FAMC pointer on ``person`` unless it is already there."""
    if not person.points_to("FAMC", family):
        person.add(g7("FAMC", family))


def append_child(family: G7Node, person: G7Node) -> bool:
    """Append ``person`` as the next child. False if already a child."""
    if has_child(family, person):
        return False
    family.add(g7("CHIL", person))
    link_child(family, person)
    return True


def place_child(family: G7Node, person: G7Node, position: int) -> bool:
    """
    Put ``person`` at 1-based child ``position`` of ``family``.

    A VOID placeholder at that position is replaced in place; a real child
    there is pushed back by inserting before it; a position past the end is
    reached by padding with VOID placeholders. False if already a child.
    """
    if position < 1:
        raise ValueError(f"Child position must be >= 1, got {position}")
    if has_child(family, person):
        return False

    remaining = position
    for index, sub in enumerate(family.children):
        if sub.tag != "CHIL":
            continue
        remaining -= 1
        if remaining == 0:
            if sub.is_void:
                sub.set_payload(person)
            else:
                family.children.insert(index, g7("CHIL", person))
            break

    if remaining > 0:
        while remaining > 1:
            family.add(g7("CHIL", VOID))
            remaining -= 1
        family.add(g7("CHIL", person))

    link_child(family, person)
    return True
