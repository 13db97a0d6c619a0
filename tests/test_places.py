from conftest import make_ctx

from gedcomx7.builders.places import place_value
from gedcomx7.gedcom7.serializer import serialize

PLACES = {
    "places": [
        {
            "id": "PL1",
            "names": [
                {"lang": "en", "value": "Vienna"},
                {"lang": "de", "value": "Wien"},
            ],
            "type": "http://gedcomx.org/City",
            "jurisdiction": {"resource": "#PL2"},
            "latitude": 48.2,
            "longitude": -16.37,
            "place": {"resource": "https://places.example/1"},
            "spatialDescription": {"resource": "https://maps.example/vienna.kml"},
        },
        {
            "id": "PL2",
            "names": [
                {"lang": "en", "value": "Austria"},
                {"lang": "de", "value": "Österreich"},
            ],
            "type": "http://gedcomx.org/Country",
        },
    ]
}


def test_original_text_only(ctx):
    node = place_value(ctx, {"original": "Somewhere"})

    assert serialize(node, 2) == "2 PLAC Somewhere\n"


def test_empty_place(ctx):
    assert place_value(ctx, None) is None
    assert place_value(ctx, {}) is None


def test_jurisdiction_chain():
    ctx = make_ctx(PLACES)
    node = place_value(ctx, {"original": "Vienna, AT", "description": "#PL1"})

    assert serialize(node, 2).splitlines() == [
        "2 PLAC Vienna, Austria",
        "3 LANG en",
        "3 FORM City, Country",
        "3 TRAN Wien, Österreich",
        "4 LANG de",
        "3 NOTE Vienna, AT",
        "3 EXID https://places.example/1",
        "4 TYPE http://www.w3.org/2001/XMLSchema#anyURI",
        "3 _OBJE @X1@",
        "3 MAP",
        "4 LATI N48.2",
        "4 LONG W16.37",
        "3 EXID PL1",
        "4 TYPE https://gedcom.io/exid-type/FamilySearch-PlaceId",
    ]


def test_kml_is_shared_media_record():
    ctx = make_ctx(PLACES)
    first = place_value(ctx, {"description": "#PL1"})
    second = place_value(ctx, {"description": "#PL1"})

    media = ctx.registry.get("OBJE:https://maps.example/vienna.kml")
    assert media is not None
    assert first.find_first("_OBJE").reference is media
    assert second.find_first("_OBJE").reference is media
    assert ctx.registry.count_by_tag() == {"OBJE": 1}
    assert "_OBJE" in ctx.extensions


def test_missing_translation_falls_back_to_preferred():
    data = {
        "places": [
            {"id": "A", "names": [{"lang": "en", "value": "Town"}], "jurisdiction": {"resource": "#B"}},
            {"id": "B", "names": [{"lang": "en", "value": "Land"}, {"lang": "fr", "value": "Pays"}]},
        ]
    }
    ctx = make_ctx(data)
    node = place_value(ctx, {"description": "#A"})

    tran = node.find_first("TRAN")
    assert node.payload == "Town, Land"
    assert tran.payload == "Town, Pays"
    assert tran.find_first("LANG").payload == "fr"
    # Not every level has a type, so no FORM
    assert node.find_first("FORM") is None
