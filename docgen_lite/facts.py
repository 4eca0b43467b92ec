"""
Case Fact Fields
================

The closed set of structured facts extracted from a legal document.

Keys are the exact placeholder names used by the template library, so a
fact record can be rendered without any field-name translation. Every value
is free text: dates and amounts are kept exactly as written in the source
document.
"""

from typing import Dict, List, Tuple, Any, Optional


# (group, [(key, description), ...]) in prompt / display order
FACT_FIELD_GROUPS: List[Tuple[str, List[Tuple[str, str]]]] = [
    ("Case", [
        ("caseNumber", "Court case number or file number"),
        ("court", "Court name / county / jurisdiction"),
        ("judge", "Assigned judge"),
        ("filingDate", "Date the document was filed"),
    ]),
    ("Parties", [
        ("petitionerName", "Petitioner, plaintiff or applicant name"),
        ("petitionerAddress", "Petitioner address"),
        ("petitionerPhone", "Petitioner phone number"),
        ("respondentName", "Respondent or defendant name"),
        ("respondentAddress", "Respondent address"),
        ("respondentPhone", "Respondent phone number"),
        ("relationship", "Relationship between the parties"),
    ]),
    ("Marriage", [
        ("marriageDate", "Date of marriage"),
        ("separationDate", "Date of separation"),
    ]),
    ("Attorney", [
        ("attorneyName", "Attorney name"),
        ("attorneyAddress", "Attorney address"),
        ("attorneyPhone", "Attorney phone"),
        ("attorneyEmail", "Attorney email"),
    ]),
    ("Federal civil", [
        ("appelantName", "Party filing the appeal"),
        ("judgmentType", "Type of judgment or order appealed from"),
        ("judgmentDate", "Date the judgment was entered"),
        ("clientName", "Client represented by counsel"),
        ("applicantName", "Applicant name (pro hac vice / in forma pauperis)"),
        ("applicantAddress", "Applicant address"),
        ("applicantPhone", "Applicant phone"),
        ("barState", "State bar of admission"),
        ("admissionDate", "Bar admission date"),
        ("localCounselName", "Local counsel name"),
        ("localCounselFirm", "Local counsel firm"),
        ("localCounselAddress", "Local counsel address"),
        ("localCounselPhone", "Local counsel phone"),
        ("localCounselEmail", "Local counsel email"),
        ("monthlyIncome", "Monthly income"),
        ("monthlyExpenses", "Monthly expenses"),
        ("cashOnHand", "Cash and checking account balance"),
        ("propertyDescription", "Property owned"),
        ("employmentStatus", "Employment status"),
        ("jurisdictionBasis", "Basis for federal jurisdiction"),
        ("venueBasis", "Basis for venue"),
        ("plaintiffDescription", "Description of the plaintiff"),
        ("defendantDescription", "Description of the defendant"),
        ("claimStatement", "Statement of the claim"),
        ("damageAmount", "Amount of damages claimed"),
    ]),
    ("Federal criminal", [
        ("defendantName", "Criminal defendant name"),
        ("arrestDate", "Date of arrest"),
        ("initialAppearanceDate", "Date of initial appearance"),
        ("reasonForExclusion", "Reason additional time is needed"),
        ("justificationForExclusion", "Why excluding time serves justice"),
        ("startDate", "Start of excluded period"),
        ("endDate", "End of excluded period"),
        ("prosecutorName", "Prosecutor name"),
        ("prosecutorAddress", "Prosecutor address"),
        ("prosecutorPhone", "Prosecutor phone"),
        ("defenseAttorneyName", "Defense attorney name"),
        ("defenseAttorneyAddress", "Defense attorney address"),
        ("defenseAttorneyPhone", "Defense attorney phone"),
    ]),
    ("Subpoena", [
        ("witnessName", "Witness name"),
        ("witnessAddress", "Witness address"),
        ("courtLocation", "Courthouse / courtroom location"),
        ("hearingDate", "Hearing date"),
        ("hearingTime", "Hearing time"),
        ("documentsRequired", "Documents the witness must bring"),
    ]),
    ("Related cases", [
        ("relatedCaseName", "Related case name"),
        ("relatedCaseNumber", "Related case number"),
        ("relatedCaseJudge", "Related case judge"),
        ("relationshipDescription", "How the cases are related"),
        ("reasonForRelation", "Why the cases should be treated as related"),
    ]),
    ("Custody", [
        ("childName", "Minor child name"),
        ("childBirthDate", "Child date of birth"),
        ("custodyBasis", "Basis for the custody request"),
        ("custodyRequest", "Requested custody and parenting time"),
    ]),
    ("Protective orders", [
        ("abuseDescription", "Description of the domestic abuse"),
        ("abuseDate", "Date of the abuse"),
        ("abuseLocation", "Location of the abuse"),
        ("harassmentDescription", "Description of the harassment"),
        ("harassmentDate", "Date of the harassment"),
        ("harassmentLocation", "Location of the harassment"),
    ]),
    ("Civil claims", [
        ("claimDescription", "Description of the small claim"),
    ]),
    ("Name change", [
        ("currentName", "Current legal name"),
        ("birthDate", "Date of birth"),
        ("birthPlace", "Place of birth"),
        ("newName", "Requested new name"),
        ("reasonForChange", "Reason for the name change"),
    ]),
    ("Expungement", [
        ("criminalCharge", "Offense of conviction"),
        ("convictionDate", "Date of conviction"),
        ("convictionCourt", "Court of conviction"),
        ("convictionCaseNumber", "Case number of the conviction"),
        ("sentenceCompleted", "Sentence terms completed"),
        ("expungementBenefit", "How expungement would benefit the petitioner"),
    ]),
    ("Eviction", [
        ("propertyAddress", "Rental property address"),
        ("tenancyType", "Type of tenancy (e.g. month-to-month)"),
        ("monthlyRent", "Monthly rent"),
        ("rentDueDate", "Day rent is due"),
        ("defaultDescription", "Description of the tenant default"),
        ("noticeServed", "Type of notice served"),
        ("noticeDate", "Date notice was served"),
        ("tenancyEndDate", "Date the tenancy ended"),
        ("rentOwed", "Rent owed"),
    ]),
    ("Guardianship", [
        ("wardName", "Proposed ward name"),
        ("wardBirthDate", "Ward date of birth"),
        ("wardAddress", "Ward address"),
        ("wardRelationship", "Ward's relationship to the petitioner"),
        ("guardianshipReason", "Why a guardian is needed"),
        ("petitionerQualifications", "Petitioner's qualifications to serve"),
        ("priorityPersons", "Persons with priority to serve"),
    ]),
    ("Probate", [
        ("decedentName", "Decedent name"),
        ("deathDate", "Date of death"),
        ("deathPlace", "Place of death"),
        ("domicileCounty", "County of domicile"),
        ("willDate", "Date of the will"),
        ("namedExecutor", "Personal representative named in the will"),
        ("estateValue", "Approximate estate value"),
        ("heirsDevisees", "Heirs and devisees"),
        ("requestedExecutor", "Personal representative requested"),
    ]),
]

FACT_FIELDS: Tuple[str, ...] = tuple(
    key for _, fields in FACT_FIELD_GROUPS for key, _ in fields
)

_FACT_FIELD_SET = frozenset(FACT_FIELDS)

# Key of the open-ended bag for facts the schema does not model
ADDITIONAL_INFO_KEY = "additionalInfo"


def is_fact_field(key: str) -> bool:
    return key in _FACT_FIELD_SET


def coerce_fact_value(value: Any) -> Optional[str]:
    """
    Normalize a raw fact value to free text.

    None stays None, strings are stripped, scalars are stringified and
    lists are joined with "; ". Objects (an address split into street and
    city, say) are flattened to their values in order.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, dict):
        value = list(value.values())
    if isinstance(value, (list, tuple)):
        parts = [coerce_fact_value(v) for v in value]
        joined = "; ".join(p for p in parts if p)
        return joined or None
    return None


def empty_fields() -> Dict[str, Optional[str]]:
    return {key: None for key in FACT_FIELDS}


def describe_schema() -> str:
    """Render the fact schema as a prompt section."""
    lines = []
    for group, fields in FACT_FIELD_GROUPS:
        lines.append(f"{group}:")
        for key, description in fields:
            lines.append(f"  - {key}: {description}")
    return "\n".join(lines)
