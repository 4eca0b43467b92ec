"""
Template Library
================

Minnesota state court and District of Minnesota federal court forms.

Placeholders are {{fieldName}} with field names from facts.FACT_FIELDS,
plus {{currentDate}} which the renderer supplies.
"""

from typing import Tuple

from .models import LegalTemplate


TEMPLATES: Tuple[LegalTemplate, ...] = (
    # State court
    LegalTemplate(
        id="motion-to-dismiss",
        name="Motion to Dismiss",
        type="motion",
        category="civil",
        body="""\
STATE OF MINNESOTA
DISTRICT COURT
{{court}}

{{petitionerName}},
    Petitioner,
v.
{{respondentName}},
    Respondent.

Case No. {{caseNumber}}

MOTION TO DISMISS

TO THE HONORABLE COURT:

Respondent, {{respondentName}}, hereby moves this Court to dismiss the above-entitled action pursuant to Minn. R. Civ. P. 12.02(e) for failure to state a claim upon which relief can be granted.

This Motion is based upon the pleadings and files herein.

Dated: {{currentDate}}

                    _________________________
                    Attorney for Respondent
                    {{attorneyName}}
                    {{attorneyAddress}}
                    {{attorneyPhone}}""",
        required_fields=("court", "petitionerName", "respondentName", "caseNumber", "attorneyName", "attorneyAddress", "attorneyPhone"),
    ),
    LegalTemplate(
        id="petition-for-dissolution-of-marriage",
        name="Petition for Dissolution of Marriage",
        type="petition",
        category="family",
        body="""\
STATE OF MINNESOTA
DISTRICT COURT
{{court}}

In Re the Marriage of:
{{petitionerName}},
    Petitioner,
and
{{respondentName}},
    Respondent.

Case No. {{caseNumber}}

PETITION FOR DISSOLUTION OF MARRIAGE

TO THE HONORABLE COURT:

Petitioner respectfully represents:

1. Petitioner's name is {{petitionerName}} and Respondent's name is {{respondentName}}.

2. Petitioner resides at {{petitionerAddress}}.

3. Respondent resides at {{respondentAddress}}.

4. The parties were married on {{marriageDate}}.

5. The parties separated on {{separationDate}}.

6. There has been an irretrievable breakdown of the marriage relationship.

WHEREFORE, Petitioner prays that this Court grant a Decree of Dissolution of Marriage.

Dated: {{currentDate}}

                    _________________________
                    {{petitionerName}}
                    Petitioner
                    {{petitionerAddress}}
                    {{petitionerPhone}}""",
        required_fields=("court", "petitionerName", "respondentName", "caseNumber", "petitionerAddress", "respondentAddress", "marriageDate", "separationDate", "petitionerPhone"),
    ),
    # Federal court
    LegalTemplate(
        id="notice-of-appeal-civil",
        name="Notice of Appeal (Civil)",
        type="notice",
        category="federal-civil",
        body="""\
UNITED STATES DISTRICT COURT
DISTRICT OF MINNESOTA

{{petitionerName}},
    Plaintiff,
v.
{{respondentName}},
    Defendant.

Case No. {{caseNumber}}

NOTICE OF APPEAL

Notice is hereby given that {{appelantName}} hereby appeals to the United States Court of Appeals for the Eighth Circuit from the {{judgmentType}} entered in this action on {{judgmentDate}}.

Dated: {{currentDate}}

                    _________________________
                    {{attorneyName}}
                    Attorney for {{appelantName}}
                    {{attorneyAddress}}
                    {{attorneyPhone}}
                    {{attorneyEmail}}""",
        required_fields=("petitionerName", "respondentName", "caseNumber", "appelantName", "judgmentType", "judgmentDate", "attorneyName", "attorneyAddress", "attorneyPhone", "attorneyEmail"),
    ),
    LegalTemplate(
        id="motion-for-admission-pro-hac-vice",
        name="Motion for Admission Pro Hac Vice",
        type="motion",
        category="federal-attorney",
        body="""\
UNITED STATES DISTRICT COURT
DISTRICT OF MINNESOTA

{{petitionerName}},
    Plaintiff,
v.
{{respondentName}},
    Defendant.

Case No. {{caseNumber}}

MOTION FOR ADMISSION PRO HAC VICE

TO THE HONORABLE COURT:

Counsel for {{clientName}} hereby moves this Court for an order admitting {{applicantName}} to practice before this Court pro hac vice in this action.

In support of this motion, counsel states:

1. {{applicantName}} is a member in good standing of the bar of {{barState}} and has been since {{admissionDate}}.

2. {{applicantName}} has not been admitted to practice before this Court.

3. {{applicantName}} is qualified and familiar with the standards of practice before this Court.

4. {{localCounselName}} of {{localCounselFirm}} is local counsel and will be responsible for compliance with all local rules.

WHEREFORE, counsel respectfully requests that this Court admit {{applicantName}} to practice pro hac vice in this action.

Dated: {{currentDate}}

                    _________________________
                    {{localCounselName}}
                    Local Counsel
                    {{localCounselAddress}}
                    {{localCounselPhone}}
                    {{localCounselEmail}}""",
        required_fields=("petitionerName", "respondentName", "caseNumber", "clientName", "applicantName", "barState", "admissionDate", "localCounselName", "localCounselFirm", "localCounselAddress", "localCounselPhone", "localCounselEmail"),
    ),
    LegalTemplate(
        id="in-forma-pauperis-application",
        name="Application to Proceed Without Prepaying Fees (In Forma Pauperis)",
        type="application",
        category="federal-civil",
        body="""\
UNITED STATES DISTRICT COURT
DISTRICT OF MINNESOTA

{{petitionerName}},
    Plaintiff,
v.
{{respondentName}},
    Defendant.

Case No. {{caseNumber}}

APPLICATION TO PROCEED WITHOUT PREPAYING FEES OR COSTS
(AFFIDAVIT IN SUPPORT OF REQUEST TO PROCEED IN FORMA PAUPERIS)

I, {{applicantName}}, declare under penalty of perjury that the following is true and correct:

1. I am the plaintiff/defendant in this case and am unable to pay the costs of these proceedings.

2. My monthly income is ${{monthlyIncome}}.

3. My monthly expenses are ${{monthlyExpenses}}.

4. I have ${{cashOnHand}} in cash and checking accounts.

5. I own the following property (describe): {{propertyDescription}}

6. I am {{employmentStatus}}.

Based on the information above, I declare that I am unable to pay the fees and costs of this proceeding and request permission to proceed in forma pauperis.

I declare under penalty of perjury that the foregoing is true and correct.

Dated: {{currentDate}}

                    _________________________
                    {{applicantName}}
                    {{applicantAddress}}
                    {{applicantPhone}}""",
        required_fields=("petitionerName", "respondentName", "caseNumber", "applicantName", "monthlyIncome", "monthlyExpenses", "cashOnHand", "propertyDescription", "employmentStatus", "applicantAddress", "applicantPhone"),
    ),
    LegalTemplate(
        id="general-civil-complaint",
        name="General Civil Complaint",
        type="complaint",
        category="federal-civil",
        body="""\
UNITED STATES DISTRICT COURT
DISTRICT OF MINNESOTA

{{petitionerName}},
    Plaintiff,
v.
{{respondentName}},
    Defendant.

Case No. {{caseNumber}}

COMPLAINT

Plaintiff, {{petitionerName}}, complaining of Defendant, {{respondentName}}, alleges:

JURISDICTION AND VENUE

1. This Court has jurisdiction over this action pursuant to {{jurisdictionBasis}}.

2. Venue is proper in this District pursuant to {{venueBasis}}.

PARTIES

3. Plaintiff {{petitionerName}} is {{plaintiffDescription}}.

4. Defendant {{respondentName}} is {{defendantDescription}}.

STATEMENT OF CLAIM

5. {{claimStatement}}

6. As a result of Defendant's actions, Plaintiff has suffered damages in the amount of {{damageAmount}}.

WHEREFORE, Plaintiff demands judgment against Defendant for damages in the amount of {{damageAmount}}, plus costs and such other relief as the Court deems just and proper.

Dated: {{currentDate}}

                    _________________________
                    {{attorneyName}}
                    Attorney for Plaintiff
                    {{attorneyAddress}}
                    {{attorneyPhone}}
                    {{attorneyEmail}}""",
        required_fields=("petitionerName", "respondentName", "caseNumber", "jurisdictionBasis", "venueBasis", "plaintiffDescription", "defendantDescription", "claimStatement", "damageAmount", "attorneyName", "attorneyAddress", "attorneyPhone", "attorneyEmail"),
    ),
    LegalTemplate(
        id="notice-of-related-cases",
        name="Notice of Related Cases",
        type="notice",
        category="federal-civil",
        body="""\
UNITED STATES DISTRICT COURT
DISTRICT OF MINNESOTA

{{petitionerName}},
    Plaintiff,
v.
{{respondentName}},
    Defendant.

Case No. {{caseNumber}}

NOTICE OF RELATED CASES

TO THE CLERK OF COURT:

Please take notice that the undersigned believes this case is related to the following pending or recently concluded case(s) in this Court:

1. Case Name: {{relatedCaseName}}
   Case Number: {{relatedCaseNumber}}
   Judge: {{relatedCaseJudge}}
   Relationship: {{relationshipDescription}}

The cases are related because {{reasonForRelation}}.

Dated: {{currentDate}}

                    _________________________
                    {{attorneyName}}
                    Attorney for {{clientName}}
                    {{attorneyAddress}}
                    {{attorneyPhone}}
                    {{attorneyEmail}}""",
        required_fields=("petitionerName", "respondentName", "caseNumber", "relatedCaseName", "relatedCaseNumber", "relatedCaseJudge", "relationshipDescription", "reasonForRelation", "attorneyName", "clientName", "attorneyAddress", "attorneyPhone", "attorneyEmail"),
    ),
    LegalTemplate(
        id="motion-to-exclude-time-under-speedy-trial-act",
        name="Motion to Exclude Time Under Speedy Trial Act",
        type="motion",
        category="federal-criminal",
        body="""\
UNITED STATES DISTRICT COURT
DISTRICT OF MINNESOTA

UNITED STATES OF AMERICA,
    Plaintiff,
v.
{{defendantName}},
    Defendant.

Case No. {{caseNumber}}

MOTION TO EXCLUDE TIME UNDER THE SPEEDY TRIAL ACT

TO THE HONORABLE COURT:

The parties hereby jointly move this Court for an order excluding time under the Speedy Trial Act, 18 U.S.C. § 3161, et seq.

In support of this motion, the parties state:

1. Defendant was arrested on {{arrestDate}} and initial appearance was held on {{initialAppearanceDate}}.

2. The parties require additional time to {{reasonForExclusion}}.

3. Excluding this time is in the interests of justice because {{justificationForExclusion}}.

4. The period to be excluded is from {{startDate}} to {{endDate}}.

WHEREFORE, the parties respectfully request that this Court exclude the above-described time period under the Speedy Trial Act.

Dated: {{currentDate}}

FOR THE GOVERNMENT:            FOR THE DEFENDANT:

_________________________     _________________________
{{prosecutorName}}             {{defenseAttorneyName}}
Assistant U.S. Attorney        Attorney for Defendant
{{prosecutorAddress}}          {{defenseAttorneyAddress}}
{{prosecutorPhone}}            {{defenseAttorneyPhone}}""",
        required_fields=("defendantName", "caseNumber", "arrestDate", "initialAppearanceDate", "reasonForExclusion", "justificationForExclusion", "startDate", "endDate", "prosecutorName", "prosecutorAddress", "prosecutorPhone", "defenseAttorneyName", "defenseAttorneyAddress", "defenseAttorneyPhone"),
    ),
    LegalTemplate(
        id="subpoena-to-testify-at-hearing-or-trial-criminal",
        name="Subpoena to Testify at Hearing or Trial (Criminal)",
        type="subpoena",
        category="federal-criminal",
        body="""\
UNITED STATES DISTRICT COURT
DISTRICT OF MINNESOTA

UNITED STATES OF AMERICA,
    Plaintiff,
v.
{{defendantName}},
    Defendant.

Case No. {{caseNumber}}

SUBPOENA TO TESTIFY AT A HEARING OR TRIAL IN A CRIMINAL CASE

TO: {{witnessName}}
    {{witnessAddress}}

YOU ARE COMMANDED to appear in the United States District Court at the place, date, and time specified below to testify in the above case.

PLACE: {{courtLocation}}

DATE AND TIME: {{hearingDate}} at {{hearingTime}}

You must also bring with you the following documents or objects: {{documentsRequired}}

FAILURE TO APPEAR may result in punishment for contempt of court and the imposition of penalties provided by law.

Date: {{currentDate}}

                              CLERK OF COURT

                    By: _________________________
                        Deputy Clerk

Attorney's Name: {{attorneyName}}
Attorney's Address: {{attorneyAddress}}
Attorney's Phone: {{attorneyPhone}}""",
        required_fields=("defendantName", "caseNumber", "witnessName", "witnessAddress", "courtLocation", "hearingDate", "hearingTime", "documentsRequired", "attorneyName", "attorneyAddress", "attorneyPhone"),
    ),
    # Minnesota family, civil, criminal, housing and probate
    LegalTemplate(
        id="child-custody-and-parenting-time-petition",
        name="Child Custody and Parenting Time Petition",
        type="petition",
        category="family",
        body="""\
STATE OF MINNESOTA
DISTRICT COURT
{{court}}

In Re the Custody of:
{{childName}},
    Minor Child.

Case No. {{caseNumber}}

PETITION FOR CHILD CUSTODY AND PARENTING TIME

TO THE HONORABLE COURT:

Petitioner, {{petitionerName}}, respectfully represents:

1. Petitioner's name is {{petitionerName}} and resides at {{petitionerAddress}}.

2. Respondent's name is {{respondentName}} and resides at {{respondentAddress}}.

3. The minor child's name is {{childName}}, born {{childBirthDate}}.

4. {{custodyBasis}}

5. Petitioner requests custody and parenting time as follows: {{custodyRequest}}

6. The best interests of the child will be served by granting this petition.

WHEREFORE, Petitioner prays that this Court award custody and establish parenting time as requested.

Dated: {{currentDate}}

                    _________________________
                    {{petitionerName}}
                    Petitioner
                    {{petitionerAddress}}
                    {{petitionerPhone}}""",
        required_fields=("court", "childName", "caseNumber", "petitionerName", "petitionerAddress", "respondentName", "respondentAddress", "childBirthDate", "custodyBasis", "custodyRequest", "petitionerPhone"),
    ),
    LegalTemplate(
        id="domestic-abuse-order-for-protection",
        name="Domestic Abuse Order for Protection",
        type="petition",
        category="protective-order",
        body="""\
STATE OF MINNESOTA
DISTRICT COURT
{{court}}

{{petitionerName}},
    Petitioner,
v.
{{respondentName}},
    Respondent.

Case No. {{caseNumber}}

PETITION FOR ORDER FOR PROTECTION

TO THE HONORABLE COURT:

Petitioner, {{petitionerName}}, respectfully represents:

1. Petitioner resides at {{petitionerAddress}}.

2. Respondent resides at {{respondentAddress}}.

3. The relationship between Petitioner and Respondent is: {{relationship}}.

4. Respondent has committed domestic abuse against Petitioner as follows: {{abuseDescription}}

5. The abuse occurred on {{abuseDate}} at {{abuseLocation}}.

6. Petitioner fears for their safety and requests protection from this Court.

WHEREFORE, Petitioner prays that this Court issue an Order for Protection restraining Respondent from contact with Petitioner.

Dated: {{currentDate}}

                    _________________________
                    {{petitionerName}}
                    Petitioner
                    {{petitionerAddress}}
                    {{petitionerPhone}}""",
        required_fields=("court", "petitionerName", "caseNumber", "respondentName", "petitionerAddress", "respondentAddress", "relationship", "abuseDescription", "abuseDate", "abuseLocation", "petitionerPhone"),
    ),
    LegalTemplate(
        id="harassment-restraining-order",
        name="Harassment Restraining Order",
        type="petition",
        category="protective-order",
        body="""\
STATE OF MINNESOTA
DISTRICT COURT
{{court}}

{{petitionerName}},
    Petitioner,
v.
{{respondentName}},
    Respondent.

Case No. {{caseNumber}}

PETITION FOR HARASSMENT RESTRAINING ORDER

TO THE HONORABLE COURT:

Petitioner, {{petitionerName}}, respectfully represents:

1. Petitioner resides at {{petitionerAddress}}.

2. Respondent resides at {{respondentAddress}}.

3. Respondent has engaged in harassment against Petitioner as follows: {{harassmentDescription}}

4. The harassment occurred on {{harassmentDate}} at {{harassmentLocation}}.

5. Petitioner requests this Court issue a restraining order to stop the harassment.

WHEREFORE, Petitioner prays that this Court issue a Harassment Restraining Order against Respondent.

Dated: {{currentDate}}

                    _________________________
                    {{petitionerName}}
                    Petitioner
                    {{petitionerAddress}}
                    {{petitionerPhone}}""",
        required_fields=("court", "petitionerName", "caseNumber", "respondentName", "petitionerAddress", "respondentAddress", "harassmentDescription", "harassmentDate", "harassmentLocation", "petitionerPhone"),
    ),
    LegalTemplate(
        id="small-claims-complaint",
        name="Small Claims Complaint",
        type="complaint",
        category="civil",
        body="""\
STATE OF MINNESOTA
CONCILIATION COURT
{{court}}

{{petitionerName}},
    Plaintiff,
v.
{{respondentName}},
    Defendant.

Case No. {{caseNumber}}

COMPLAINT

Plaintiff, {{petitionerName}}, complaining of Defendant, {{respondentName}}, states:

1. Plaintiff resides at {{petitionerAddress}}.

2. Defendant resides at {{respondentAddress}}.

3. {{claimDescription}}

4. As a result, Defendant owes Plaintiff the sum of ${{damageAmount}}.

5. Demand has been made upon Defendant for payment, but payment has been refused.

WHEREFORE, Plaintiff demands judgment against Defendant for ${{damageAmount}}, plus costs and disbursements.

Dated: {{currentDate}}

                    _________________________
                    {{petitionerName}}
                    Plaintiff
                    {{petitionerAddress}}
                    {{petitionerPhone}}""",
        required_fields=("court", "petitionerName", "caseNumber", "respondentName", "petitionerAddress", "respondentAddress", "claimDescription", "damageAmount", "petitionerPhone"),
    ),
    LegalTemplate(
        id="name-change-petition",
        name="Name Change Petition",
        type="petition",
        category="civil",
        body="""\
STATE OF MINNESOTA
DISTRICT COURT
{{court}}

In Re the Matter of the Name Change of:
{{currentName}}

Case No. {{caseNumber}}

PETITION FOR NAME CHANGE

TO THE HONORABLE COURT:

Petitioner, {{currentName}}, respectfully represents:

1. Petitioner's current legal name is {{currentName}}.

2. Petitioner resides at {{petitionerAddress}}.

3. Petitioner was born on {{birthDate}} at {{birthPlace}}.

4. Petitioner desires to change their name to {{newName}}.

5. The reason for this name change is: {{reasonForChange}}

6. Petitioner is not seeking this name change for any fraudulent or illegal purpose.

WHEREFORE, Petitioner prays that this Court grant the name change from {{currentName}} to {{newName}}.

Dated: {{currentDate}}

                    _________________________
                    {{currentName}}
                    Petitioner
                    {{petitionerAddress}}
                    {{petitionerPhone}}""",
        required_fields=("court", "currentName", "caseNumber", "petitionerAddress", "birthDate", "birthPlace", "newName", "reasonForChange", "petitionerPhone"),
    ),
    LegalTemplate(
        id="criminal-expungement-petition",
        name="Criminal Expungement Petition",
        type="petition",
        category="criminal",
        body="""\
STATE OF MINNESOTA
DISTRICT COURT
{{court}}

In Re the Matter of the Expungement of:
{{petitionerName}}

Case No. {{caseNumber}}

PETITION FOR EXPUNGEMENT

TO THE HONORABLE COURT:

Petitioner, {{petitionerName}}, respectfully represents:

1. Petitioner's name is {{petitionerName}} and resides at {{petitionerAddress}}.

2. Petitioner was convicted of {{criminalCharge}} on {{convictionDate}} in {{convictionCourt}}.

3. The case number for the conviction was {{convictionCaseNumber}}.

4. Petitioner has completed all terms of the sentence including {{sentenceCompleted}}.

5. Expungement would benefit Petitioner because {{expungementBenefit}}.

6. The interests of the public and public safety would be served by granting this petition.

WHEREFORE, Petitioner prays that this Court order the expungement of the criminal record.

Dated: {{currentDate}}

                    _________________________
                    {{petitionerName}}
                    Petitioner
                    {{petitionerAddress}}
                    {{petitionerPhone}}""",
        required_fields=("court", "petitionerName", "caseNumber", "petitionerAddress", "criminalCharge", "convictionDate", "convictionCourt", "convictionCaseNumber", "sentenceCompleted", "expungementBenefit", "petitionerPhone"),
    ),
    LegalTemplate(
        id="landlord-tenant-eviction-complaint",
        name="Landlord-Tenant Eviction Complaint",
        type="complaint",
        category="housing",
        body="""\
STATE OF MINNESOTA
DISTRICT COURT
{{court}}

{{petitionerName}},
    Plaintiff,
v.
{{respondentName}},
    Defendant.

Case No. {{caseNumber}}

COMPLAINT FOR UNLAWFUL DETAINER

Plaintiff, {{petitionerName}}, complaining of Defendant, {{respondentName}}, states:

1. Plaintiff is the owner of the property located at {{propertyAddress}}.

2. Defendant is in possession of said property under a {{tenancyType}} tenancy.

3. The monthly rent is ${{monthlyRent}}, due on the {{rentDueDate}} of each month.

4. Defendant is in default as follows: {{defaultDescription}}

5. {{noticeServed}} notice was served on Defendant on {{noticeDate}}.

6. The rental period expired on {{tenancyEndDate}}, and Defendant unlawfully holds over.

WHEREFORE, Plaintiff demands judgment for possession of the premises, rent in the amount of ${{rentOwed}}, and costs.

Dated: {{currentDate}}

                    _________________________
                    {{attorneyName}}
                    Attorney for Plaintiff
                    {{attorneyAddress}}
                    {{attorneyPhone}}""",
        required_fields=("court", "petitionerName", "caseNumber", "respondentName", "propertyAddress", "tenancyType", "monthlyRent", "rentDueDate", "defaultDescription", "noticeServed", "noticeDate", "tenancyEndDate", "rentOwed", "attorneyName", "attorneyAddress", "attorneyPhone"),
    ),
    LegalTemplate(
        id="guardianship-petition",
        name="Guardianship Petition",
        type="petition",
        category="probate",
        body="""\
STATE OF MINNESOTA
DISTRICT COURT
PROBATE DIVISION
{{court}}

In Re the Guardianship of:
{{wardName}},
    Ward.

Case No. {{caseNumber}}

PETITION FOR APPOINTMENT OF GUARDIAN

TO THE HONORABLE COURT:

Petitioner, {{petitionerName}}, respectfully represents:

1. Petitioner's name is {{petitionerName}} and resides at {{petitionerAddress}}.

2. The proposed Ward's name is {{wardName}}, born {{wardBirthDate}}, residing at {{wardAddress}}.

3. Ward is {{wardRelationship}} to Petitioner.

4. Ward requires a guardian because {{guardianshipReason}}.

5. Petitioner is qualified to serve as guardian because {{petitionerQualifications}}.

6. The following persons have priority or equal priority to serve as guardian: {{priorityPersons}}.

WHEREFORE, Petitioner prays that this Court appoint Petitioner as guardian of the person and/or estate of {{wardName}}.

Dated: {{currentDate}}

                    _________________________
                    {{petitionerName}}
                    Petitioner
                    {{petitionerAddress}}
                    {{petitionerPhone}}""",
        required_fields=("court", "petitionerName", "caseNumber", "wardName", "petitionerAddress", "wardBirthDate", "wardAddress", "wardRelationship", "guardianshipReason", "petitionerQualifications", "priorityPersons", "petitionerPhone"),
    ),
    LegalTemplate(
        id="probate-petition-for-formal-administration",
        name="Probate Petition for Formal Administration",
        type="petition",
        category="probate",
        body="""\
STATE OF MINNESOTA
DISTRICT COURT
PROBATE DIVISION
{{court}}

In Re the Estate of:
{{decedentName}},
    Decedent.

Case No. {{caseNumber}}

PETITION FOR FORMAL PROBATE OF WILL AND APPOINTMENT OF PERSONAL REPRESENTATIVE

TO THE HONORABLE COURT:

Petitioner, {{petitionerName}}, respectfully represents:

1. Petitioner's name is {{petitionerName}} and resides at {{petitionerAddress}}.

2. Decedent's name was {{decedentName}}, who died on {{deathDate}} at {{deathPlace}}.

3. Decedent was domiciled in {{domicileCounty}} County, Minnesota at the time of death.

4. The original will dated {{willDate}} is filed with this petition.

5. The will names {{namedExecutor}} as personal representative.

6. The approximate value of the estate is ${{estateValue}}.

7. The heirs and devisees are: {{heirsDevisees}}.

WHEREFORE, Petitioner prays that this Court admit the will to probate and appoint {{requestedExecutor}} as personal representative.

Dated: {{currentDate}}

                    _________________________
                    {{petitionerName}}
                    Petitioner
                    {{petitionerAddress}}
                    {{petitionerPhone}}""",
        required_fields=("court", "petitionerName", "caseNumber", "decedentName", "petitionerAddress", "deathDate", "deathPlace", "domicileCounty", "willDate", "namedExecutor", "estateValue", "heirsDevisees", "requestedExecutor", "petitionerPhone"),
    ),
)
