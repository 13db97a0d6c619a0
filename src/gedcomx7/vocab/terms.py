"""
Non-fact vocabulary: genders, name types and parts, EXID types, and the
extension tags the converter may emit.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

GX = "http://gedcomx.org/"
EXID_TYPE = "https://gedcom.io/exid-type/"

# ---------------------------------------------------------------------------
# EXID types
# ---------------------------------------------------------------------------

EXID_PERSON = EXID_TYPE + "FamilySearch-PersonId"
EXID_RELATIONSHIP = EXID_TYPE + "FamilySearch-RelationshipId"
EXID_SOURCE_DESCRIPTION = EXID_TYPE + "FamilySearch-SourceDescriptionId"
EXID_PLACE = EXID_TYPE + "FamilySearch-PlaceId"
EXID_URI = "http://www.w3.org/2001/XMLSchema#anyURI"

# ---------------------------------------------------------------------------
# Gender
# ---------------------------------------------------------------------------

SEX_CODES: Dict[str, str] = {
    GX + "Male": "M",
    GX + "Female": "F",
    GX + "Unknown": "U",
    GX + "Intersex": "X",
}

# ---------------------------------------------------------------------------
# Relationship types
# ---------------------------------------------------------------------------

COUPLE = GX + "Couple"
PARENT_CHILD = GX + "ParentChild"

# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------

NAME_PART_PREFIX = GX + "Prefix"
NAME_PART_SUFFIX = GX + "Suffix"
NAME_PART_GIVEN = GX + "Given"
NAME_PART_SURNAME = GX + "Surname"
QUALIFIER_PRIMARY = GX + "Primary"
QUALIFIER_FAMILIAR = GX + "Familiar"

# name type -> (TYPE payload, optional PHRASE)
NAME_TYPES: Dict[str, Tuple[str, Optional[str]]] = {
    GX + "BirthName": ("BIRTH", None),
    GX + "MarriedName": ("MARRIED", None),
    GX + "AlsoKnownAs": ("AKA", None),
    GX + "Nickname": ("AKA", "Nickname"),
    GX + "AdoptiveName": ("OTHER", "Adoptive name"),
    GX + "FormalName": ("OTHER", "Formal name"),
    GX + "ReligiousName": ("OTHER", "Religious name"),
}

# ---------------------------------------------------------------------------
# Media
# ---------------------------------------------------------------------------

KML_MEDIA_TYPE = "application/vnd.google-earth.kml+xml"

# ---------------------------------------------------------------------------
# Extension tags (declared in HEAD.SCHMA when used)
#
# Relocated standard structures use the standard structure's URI.
# ---------------------------------------------------------------------------

EXTENSION_URIS: Dict[str, str] = {
    "_LANG": "https://gedcom.io/terms/v7/LANG",
    "_DATE": "https://gedcom.io/terms/v7/DATE",
    "_OBJE": "https://gedcom.io/terms/v7/OBJE",
    "_RUFNAM": GX + "Primary",
}
