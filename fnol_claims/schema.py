"""
Pydantic v2 schemas for FNOL (First Notice of Loss) claim records.
Attributes are snake_case; serialized names are the camelCase ones used in the
standard output (policyInfo.policyNumber, incidentInfo.date, ...).
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

RouteType = Literal["fast-track", "manual-review", "investigation", "specialist-queue"]
PartyRole = Literal["claimant", "third-party"]

ROUTE_FAST_TRACK = "fast-track"
ROUTE_MANUAL_REVIEW = "manual-review"
ROUTE_INVESTIGATION = "investigation"
ROUTE_SPECIALIST_QUEUE = "specialist-queue"


class _FNOLModel(BaseModel):
    """Frozen base: camelCase aliases, blank strings stored as None."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


# --- Policy ---
class PolicyInfo(_FNOLModel):
    """Policy information from the claim."""

    policy_number: Optional[str] = Field(None, description="Policy number")
    policyholder_name: Optional[str] = Field(None, description="Policy holder full name")
    effective_date_start: Optional[str] = Field(None, description="Policy effective start date, as written")
    effective_date_end: Optional[str] = Field(None, description="Policy effective end date, as written")


# --- Incident ---
class IncidentInfo(_FNOLModel):
    """Incident details."""

    date: Optional[str] = Field(None, description="Date of incident, as written")
    time: Optional[str] = Field(None, description="Time of incident")
    location: Optional[str] = Field(None, description="Incident location/address")
    description: Optional[str] = Field(None, description="Incident description")


# --- Parties ---
class InvolvedParty(_FNOLModel):
    """A party involved in the claim (claimant or third party)."""

    name: Optional[str] = None
    role: PartyRole
    contact_details: Optional[str] = Field(None, description="Email, phone or address")


# --- Asset ---
class AssetDetails(_FNOLModel):
    """Claimed asset and damage estimate."""

    asset_type: Optional[str] = Field(None, description="Vehicle, Property, Equipment or N/A")
    asset_id: Optional[str] = Field(None, description="Asset identifier or VIN")
    estimated_damage: Optional[float] = Field(None, ge=0, allow_inf_nan=False)


# --- Top-level claim record ---
class ExtractedFields(_FNOLModel):
    """
    Canonical FNOL claim record.
    Every field is optional at extraction level; the completeness checker
    and router decide what its absence means.
    """

    policy_info: PolicyInfo = Field(default_factory=PolicyInfo)
    incident_info: IncidentInfo = Field(default_factory=IncidentInfo)
    involved_parties: tuple[InvolvedParty, ...] = ()
    asset_details: AssetDetails = Field(default_factory=AssetDetails)
    claim_type: Optional[str] = Field(None, description="e.g. Auto Collision, Injury, Theft")
    attachments: tuple[str, ...] = Field((), description="Attachment file names")
    initial_estimate: Optional[float] = Field(None, ge=0, allow_inf_nan=False)

    @field_validator("involved_parties", mode="before")
    @classmethod
    def _parties_default(cls, value):
        return () if value is None else value

    @field_validator("attachments", mode="before")
    @classmethod
    def _split_attachments(cls, value):
        if value is None:
            return ()
        if isinstance(value, str):
            return value.split(",")
        return value

    @field_validator("attachments")
    @classmethod
    def _dedupe_attachments(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        names = (name.strip() for name in value)
        return tuple(dict.fromkeys(name for name in names if name))


class ClaimOutput(_FNOLModel):
    """Result of one processing call: the record, what is missing, and where it goes."""

    extracted_fields: ExtractedFields
    missing_fields: tuple[str, ...] = ()
    recommended_route: RouteType
    reasoning: str
