# src/gedcomx7/vocab/facts.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

GX = "http://gedcomx.org/"
FS = "http://familysearch.org/v1/"


class FactKind(Enum):
    """How a GEDCOM X fact type becomes a GEDCOM 7 structure."""

    EVENT = "event"            # standard event tag, fact value -> TYPE
    ATTRIBUTE = "attribute"    # standard attribute tag, fact value -> payload
    GENERIC_EVENT = "even"     # EVEN + TYPE <description>, value -> NOTE
    GENERIC_FACT = "fact"      # FACT <value> + TYPE <description>
    DATA_URI = "data"          # EVEN typed with a decoded data: URI
    UNKNOWN = "unknown"        # reported; EVEN typed with the raw URI


class FactScope(Enum):
    INDIVIDUAL = "individual"
    COUPLE = "couple"


@dataclass(frozen=True)
class FactMapping:
    kind: FactKind
    tag: str
    description: Optional[str] = None


def _events(table: Dict[str, str]) -> Dict[str, FactMapping]:
    return {GX + k: FactMapping(FactKind.EVENT, v) for k, v in table.items()}


def _attributes(table: Dict[str, str], base: str = GX) -> Dict[str, FactMapping]:
    return {base + k: FactMapping(FactKind.ATTRIBUTE, v) for k, v in table.items()}


def _generic_events(table: Dict[str, str]) -> Dict[str, FactMapping]:
    return {GX + k: FactMapping(FactKind.GENERIC_EVENT, "EVEN", v) for k, v in table.items()}


def _generic_facts(table: Dict[str, str], base: str = GX) -> Dict[str, FactMapping]:
    return {base + k: FactMapping(FactKind.GENERIC_FACT, "FACT", v) for k, v in table.items()}


# ---------------------------------------------------------------------------
# Individual facts
# ---------------------------------------------------------------------------

INDIVIDUAL_FACTS: Dict[str, FactMapping] = {
    **_events({
        "Adoption": "ADOP",
        "Baptism": "BAPM",
        "BarMitzvah": "BARM",
        "BatMitzvah": "BASM",
        "Birth": "BIRT",
        "Blessing": "BLES",
        "Burial": "BURI",
        "Census": "CENS",
        "Christening": "CHR",
        "AdultChristening": "CHRA",
        "Confirmation": "CONF",
        "Cremation": "CREM",
        "Death": "DEAT",
        "Emigration": "EMIG",
        "FirstCommunion": "FCOM",
        "Graduation": "GRAD",
        "Immigration": "IMMI",
        "Naturalization": "NATU",
        "Ordination": "ORDN",
        "Probate": "PROB",
        "Retirement": "RETI",
        "Will": "WILL",
    }),
    **_attributes({
        "Caste": "CAST",
        "PhysicalDescription": "DSCR",
        "Education": "EDUC",
        "NationalId": "IDNO",
        "NumberOfChildren": "NCHI",
        "NumberOfMarriages": "NMR",
        "Occupation": "OCCU",
        "Property": "PROP",
        "Religion": "RELI",
        "Residence": "RESI",
    }),
    **_attributes({"TitleOfNobility": "TITL"}, base=FS),
    **_generic_events({
        "Amnesty": "A person's amnesty.",
        "Arrest": "A person's arrest.",
        "BirthNotice": "A person's birth notice, such as posted in a newspaper or other publishing medium.",
        "Circumcision": "A person's circumcision.",
        "Court": "The appearance of a person in a court proceeding.",
        "EducationEnrollment": "A person's enrollment in an educational program or institution.",
        "Enslavement": "The enslavement of a person.",
        "Excommunication": "A person's excommunication from a church.",
        "Funeral": "A person's funeral.",
        "GenderChange": "A person's gender change.",
        "Imprisonment": "A person's imprisonment.",
        "Inquest": "A legal inquest.",
        "LandTransaction": "A land transaction enacted by a person.",
        "MilitaryAward": "A person's military award.",
        "MilitaryDischarge": "A person's military discharge.",
        "MilitaryDraftRegistration": "A person's registration for a military draft.",
        "MilitaryInduction": "A person's military induction.",
        "Mission": "A person's church mission.",
        "MoveFrom": "A person's move (i.e., change of residence) from a location.",
        "MoveTo": "A person's move (i.e., change of residence) to a new location.",
        "MultipleBirth": "A fact that a person was born as part of a multiple birth (e.g., twin, triplet, etc.).",
        "Pardon": "A person's legal pardon.",
        "Stillbirth": "A person's stillbirth.",
        "TaxAssessment": "A person's tax assessment.",
        "Visit": "A person's visit to a place different from the person's residence.",
        "Yahrzeit": "A person's yahrzeit date, the anniversary of their death as measured by the Hebrew calendar.",
    }),
    **_generic_facts({
        "AncestralHall": "A person's ancestral hall.",
        "AncestralPoem": "A person's ancestral poem.",
        "Apprenticeship": "A person's apprenticeship.",
        "Award": "A person's award (medal, honor).",
        "Branch": "A person's branch within an extended clan.",
        "Clan": "A person's clan.",
        "Ethnicity": "A person's ethnicity.",
        "GenerationNumber": (
            "A person's generation number, indicating the number of generations "
            "the person is removed from a known \"first\" ancestor."
        ),
        "Heimat": "A person's heimat (ancestral home, place of origin).",
        "Language": "A language spoken by a person.",
        "Living": "A record of a person's living for a specific period.",
        "MaritalStatus": "A person's marital status.",
        "Medical": "A person's medical record, such as for an illness or hospital stay.",
        "MilitaryService": "A person's military service.",
        "Nationality": "A person's nationality.",
        "Obituary": "A person's obituary.",
        "OfficialPosition": "A person's official (government) position.",
        "Race": "The declaration of a person's race, presumably in a historical document.",
        "Tribe": "A person's tribe.",
    }),
    **_generic_facts({"LifeSketch": "Life sketch"}, base=FS),
}


# ---------------------------------------------------------------------------
# Couple relationship facts
# ---------------------------------------------------------------------------

COUPLE_FACTS: Dict[str, FactMapping] = {
    **_events({
        "Annulment": "ANUL",
        "Census": "CENS",
        "Divorce": "DIV",
        "DivorceFiling": "DIVF",
        "Engagement": "ENGA",
        "MarriageBanns": "MARB",
        "MarriageContract": "MARC",
        "MarriageLicense": "MARL",
        "Marriage": "MARR",
    }),
    **_attributes({
        "Residence": "RESI",
        "NumberOfChildren": "NCHI",
    }),
    **_generic_events({
        "CommonLawMarriage": "A marriage by common law.",
        "CivilUnion": "A civil union of a couple.",
        "DomesticPartnership": "A domestic partnership of a couple.",
        "MarriageNotice": "A marriage notice.",
        "Separation": "A couple's separation.",
    }),
}

FACT_TABLES: Dict[FactScope, Dict[str, FactMapping]] = {
    FactScope.INDIVIDUAL: INDIVIDUAL_FACTS,
    FactScope.COUPLE: COUPLE_FACTS,
}

# Facts whose qualifiers may carry an age
AGE_SCOPES = {FactScope.INDIVIDUAL}


def lookup_fact(fact_type: Optional[str], scope: FactScope) -> FactMapping:
    """
    Resolve a GEDCOM X fact type URI to its mapping.

    Never raises: ``data:`` URIs map to DATA_URI and anything else outside
    the table maps to UNKNOWN, leaving reporting to the caller.
    """
    if fact_type:
        mapping = FACT_TABLES[scope].get(fact_type)
        if mapping is not None:
            return mapping
        if fact_type.startswith("data:"):
            return FactMapping(FactKind.DATA_URI, "EVEN")
    return FactMapping(FactKind.UNKNOWN, "EVEN", fact_type)


# ---------------------------------------------------------------------------
# Fact qualifiers
# ---------------------------------------------------------------------------

QUALIFIER_TAGS: Dict[str, str] = {
    GX + "Age": "AGE",
    GX + "Cause": "CAUS",
    GX + "Religion": "RELI",
}

QUALIFIER_NOTES: Dict[str, str] = {
    GX + "Transport": "transported via {value}",
    GX + "NonConsensual": "nonconsensual",
}
