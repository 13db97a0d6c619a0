from gedcomx7.gedcom7.node import VOID, G7Node, g7
from gedcomx7.gedcom7.serializer import Serializer, serialize


def test_plain_structure_lines():
    node = g7("INDI", None, g7("NAME", "John /Doe/", g7("GIVN", "John")), g7("SEX", "M"))

    assert serialize(node) == (
        "0 INDI\n"
        "1 NAME John /Doe/\n"
        "2 GIVN John\n"
        "1 SEX M\n"
    )


def test_multiline_payload_uses_cont():
    node = g7("NOTE", "first\n\nthird")

    assert serialize(node, 1) == "1 NOTE first\n2 CONT\n2 CONT third\n"


def test_carriage_returns_are_normalized():
    node = g7("NOTE", "a\r\nb\rc")

    assert node.payload == "a\nb\nc"
    assert serialize(node).count("CONT") == 2


def test_leading_at_is_doubled():
    node = g7("NOTE", "@home\n@work")

    assert serialize(node) == "0 NOTE @@home\n1 CONT @@work\n"


def test_text_starting_with_newline():
    assert serialize(g7("NOTE", "\nbody")) == "0 NOTE\n1 CONT body\n"


def test_void_child_renders_placeholder():
    fam = g7("FAM", None, g7("CHIL", VOID))

    assert serialize(fam) == "0 FAM\n1 CHIL @VOID@\n"


def test_empty_string_payload_is_absent():
    node = G7Node("DEAT", "")
    assert node.payload is None
    assert serialize(node) == "0 DEAT\n"


def test_anchors_only_for_referenced_records_in_document_order():
    a = g7("INDI")
    b = g7("INDI")
    unused = g7("INDI")
    fam = g7("FAM", None, g7("HUSB", b), g7("WIFE", a))

    text = Serializer().render_document([a, b, unused, fam])

    assert b.anchor == "X1"
    assert a.anchor == "X2"
    assert unused.anchor is None
    assert fam.anchor is None
    assert text.splitlines() == [
        "0 @X2@ INDI",
        "0 @X1@ INDI",
        "0 INDI",
        "0 FAM",
        "1 HUSB @X1@",
        "1 WIFE @X2@",
    ]


def test_same_target_keeps_one_anchor():
    src = g7("SOUR")
    indi = g7("INDI", None, g7("SOUR", src), g7("NAME", "x", g7("SOUR", src)))

    Serializer().render_document([indi, src])

    assert src.anchor == "X1"


def test_dangling_targets_are_collected():
    orphan = g7("SOUR")
    indi = g7("INDI", None, g7("SOUR", orphan))

    serializer = Serializer()
    serializer.render_document([indi])

    assert serializer.dangling == [orphan]


def test_node_helpers():
    target = g7("INDI")
    fam = g7("FAM", None, g7("HUSB", target), None, g7("CHIL", VOID))

    assert len(fam.children) == 2
    assert fam.points_to("HUSB", target)
    assert not fam.points_to("WIFE", target)
    assert fam.find_first("CHIL").is_void
    assert fam.find_first("HUSB").reference is target
    assert [n.tag for n in fam.iter_subtree()] == ["FAM", "HUSB", "CHIL"]
