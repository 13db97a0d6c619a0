import pytest

from gedcomx7 import NumberingError, convert
from gedcomx7.builders.person import person_stub
from gedcomx7.gedcom7.node import g7
from gedcomx7.relationships.numbering import resolution_order, resolve_numbering

GX = "http://gedcomx.org/"


def numbered(pid, number, gender=None, field="ascendancyNumber"):
    person = {"id": pid, "display": {field: number}}
    if gender:
        person["gender"] = {"type": GX + gender}
    return person


def register(ctx, key, pid, sex=None):
    node = person_stub(pid)
    if sex:
        node.add(g7("SEX", sex))
    ctx.numbering.person_at[key] = node
    return node


def families(ctx):
    return [r for r in ctx.registry.records() if r.tag == "FAM"]


def top_level(doc, tag):
    return sum(1 for line in doc.splitlines() if line.startswith("0 ") and line.endswith(" " + tag))


def child_ids(family):
    return ["VOID" if c.is_void else c.reference.source_id for c in family.find_children("CHIL")]


def test_resolution_order_is_shortest_first():
    keys = ["10", "2", "1.1", "1", "1-S", "1.10", "1.2"]
    assert resolution_order(keys) == ["1", "2", "10", "1-S", "1.1", "1.2", "1.10"]


def test_ahnentafel_parents(ctx):
    child = register(ctx, "1", "C")
    father = register(ctx, "2", "F")
    mother = register(ctx, "3", "M")

    resolve_numbering(ctx)

    [fam] = families(ctx)
    assert fam.points_to("HUSB", father)
    assert fam.points_to("WIFE", mother)
    assert fam.points_to("CHIL", child)
    assert child.points_to("FAMC", fam)


def test_ahnentafel_single_parent(ctx):
    child = register(ctx, "1", "C")
    mother = register(ctx, "3", "M")

    resolve_numbering(ctx)

    [fam] = families(ctx)
    assert fam.find_first("HUSB") is None
    assert fam.points_to("WIFE", mother)
    assert fam.points_to("CHIL", child)


def test_ahnentafel_input_order_does_not_matter():
    people = [numbered("M", 3), numbered("C", 1), numbered("F", 2)]

    text = convert({"persons": people})
    reversed_text = convert({"persons": list(reversed(people))})

    for doc in (text, reversed_text):
        assert top_level(doc, "FAM") == 1
        assert doc.count("1 CHIL") == 1
        assert doc.count("1 HUSB") == 1
        assert doc.count("1 WIFE") == 1


def test_daboville_spouse_and_children(ctx):
    anchor = register(ctx, "5", "P5", "M")
    spouse = register(ctx, "5-S", "S5", "F")
    first = register(ctx, "5.1", "P5.1")
    third = register(ctx, "5.3", "P5.3")

    resolve_numbering(ctx)

    [fam] = families(ctx)
    assert fam.points_to("HUSB", anchor)
    assert fam.points_to("WIFE", spouse)
    assert child_ids(fam) == ["P5.1", "VOID", "P5.3"]
    assert first.points_to("FAMC", fam)
    assert third.points_to("FAMC", fam)


def test_children_join_first_numbered_spouse_family(ctx):
    anchor = register(ctx, "5", "P5", "M")
    spouse = register(ctx, "5-S1", "S5", "F")
    register(ctx, "5.1", "P5.1")
    register(ctx, "5.3", "P5.3")

    resolve_numbering(ctx)

    [fam] = families(ctx)
    assert fam.points_to("HUSB", anchor)
    assert fam.points_to("WIFE", spouse)
    assert child_ids(fam) == ["P5.1", "VOID", "P5.3"]
    assert ctx.numbering.family_at["5-S1"] is fam
    assert ctx.numbering.family_at["5"] is fam


def test_first_spouse_ambiguity_reported_once(ctx, messages):
    register(ctx, "5", "P5")
    register(ctx, "5-S1", "S5")
    register(ctx, "5.1", "P5.1")

    resolve_numbering(ctx)

    assert len(families(ctx)) == 1
    assert len(messages) == 1
    assert "5-S1" in messages[0]


def test_numbered_spouses_get_own_families(ctx):
    register(ctx, "5", "P5", "F")
    register(ctx, "5-S1", "H1", "M")
    register(ctx, "5-S2", "H2", "M")

    resolve_numbering(ctx)

    assert len(families(ctx)) == 2
    assert ctx.numbering.family_at["5"] is ctx.numbering.family_at["5-S1"]


def test_children_without_spouse_get_single_parent_family(ctx, messages):
    parent = register(ctx, "7", "P7", "F")
    register(ctx, "7.2", "P7.2")

    resolve_numbering(ctx)

    [fam] = families(ctx)
    assert fam.points_to("WIFE", parent)
    assert child_ids(fam) == ["VOID", "P7.2"]
    assert messages == []


def test_missing_prefix_is_fatal(ctx):
    register(ctx, "5.1", "P5.1")

    with pytest.raises(NumberingError) as excinfo:
        resolve_numbering(ctx)

    assert excinfo.value.key == "5.1"
    assert excinfo.value.missing == "5"
    assert families(ctx) == []


def test_missing_prefix_fails_whole_conversion():
    with pytest.raises(NumberingError):
        convert({"persons": [numbered("X", "9.1", field="descendancyNumber")]})


def test_ambiguous_spouse_sex_is_reported():
    messages = []
    people = [numbered("A", "1"), numbered("B", "1-S")]

    convert({"persons": people}, error=messages.append)

    assert any("1-S" in m for m in messages)


def test_unrecognized_key_is_reported(ctx, messages):
    register(ctx, "abc", "P")

    resolve_numbering(ctx)

    assert messages == ["Unrecognized generation number 'abc'; skipped"]
    assert ctx.stats["generation_numbers"] == 1
