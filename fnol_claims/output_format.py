"""
Output format and form helpers for FNOL.
Builds the standard extractedFields / missingFields / recommendedRoute / reasoning
output, display values for the claim form, and claim records from manual entry.
"""

import json
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from .patterns import parse_amount
from .schema import ClaimOutput, ExtractedFields

# Route -> display metadata for the dashboard.
ROUTE_CONFIG = MappingProxyType({
    "fast-track": {"label": "Fast-Track", "color": "#22c55e", "icon": "⚡"},
    "manual-review": {"label": "Manual Review", "color": "#f59e0b", "icon": "📋"},
    "investigation": {"label": "Investigation Flag", "color": "#ef4444", "icon": "🔍"},
    "specialist-queue": {"label": "Specialist Queue", "color": "#0ea5e9", "icon": "🏥"},
})


def _party_attr(d: ExtractedFields, role: str, attr: str):
    party = next((p for p in d.involved_parties if p.role == role), None)
    return getattr(party, attr) if party else None


# All displayed fields (label, output path, getter), grouped like the claim form.
FORM_SECTIONS = [
    ("Policy Information", [
        ("Policy Number", "policyInfo.policyNumber", lambda d: d.policy_info.policy_number),
        ("Policyholder Name", "policyInfo.policyholderName", lambda d: d.policy_info.policyholder_name),
        ("Effective Date Start", "policyInfo.effectiveDateStart", lambda d: d.policy_info.effective_date_start),
        ("Effective Date End", "policyInfo.effectiveDateEnd", lambda d: d.policy_info.effective_date_end),
    ]),
    ("Incident Information", [
        ("Incident Date", "incidentInfo.date", lambda d: d.incident_info.date),
        ("Incident Time", "incidentInfo.time", lambda d: d.incident_info.time),
        ("Location", "incidentInfo.location", lambda d: d.incident_info.location),
        ("Description", "incidentInfo.description", lambda d: d.incident_info.description),
    ]),
    ("Involved Parties", [
        ("Claimant", "involvedParties", lambda d: _party_attr(d, "claimant", "name")),
        ("Claimant Contact", "involvedParties", lambda d: _party_attr(d, "claimant", "contact_details")),
        ("Third Party", "involvedParties", lambda d: _party_attr(d, "third-party", "name")),
        ("Third Party Contact", "involvedParties", lambda d: _party_attr(d, "third-party", "contact_details")),
    ]),
    ("Asset Details", [
        ("Asset Type", "assetDetails.assetType", lambda d: d.asset_details.asset_type),
        ("Asset ID", "assetDetails.assetId", lambda d: d.asset_details.asset_id),
        ("Estimated Damage", "assetDetails.estimatedDamage", lambda d: d.asset_details.estimated_damage),
    ]),
    ("Other Mandatory Fields", [
        ("Claim Type", "claimType", lambda d: d.claim_type),
        ("Attachments", "attachments", lambda d: d.attachments),
        ("Initial Estimate", "initialEstimate", lambda d: d.initial_estimate),
    ]),
]


def build_standard_output(output: ClaimOutput) -> dict:
    """
    Build the standard output JSON:
    { "extractedFields": {}, "missingFields": [], "recommendedRoute": "", "reasoning": "" }
    """
    return output.model_dump(mode="json", by_alias=True)


def to_json(output: ClaimOutput, indent: int = 2) -> str:
    return json.dumps(build_standard_output(output), indent=indent)


def get_field_value_for_form(doc: ExtractedFields, label: str) -> str:
    """Get display value for one field by label (for claim form UI)."""
    for _, rows in FORM_SECTIONS:
        for lbl, _, getter in rows:
            if lbl != label:
                continue
            val = getter(doc)
            if val is None or val == () or val == "":
                return "—"
            if isinstance(val, tuple):
                return ", ".join(str(x) for x in val)
            if isinstance(val, float):
                return f"${val:,.2f}"
            return str(val)
    raise KeyError(f"Unknown form field: {label}")


def _form_amount(value: Any, label: str) -> Optional[float]:
    if value is None or isinstance(value, (int, float)):
        return value
    text = str(value).strip().lstrip("$")
    if not text:
        return None
    amount = parse_amount(text)
    if amount is None:
        raise ValueError(f"{label} must be a number, got {value!r}")
    return amount


def fields_from_form(values: Mapping[str, Any]) -> ExtractedFields:
    """
    Build a claim record from the flat manual-entry form.
    Blank inputs become None; a party is only added when its name is given.
    """
    def get(key: str) -> Any:
        return values.get(key)

    parties: List[dict] = []
    for role, prefix in (("claimant", "claimant"), ("third-party", "third_party")):
        name = get(f"{prefix}_name")
        if name and str(name).strip():
            parties.append({
                "name": name,
                "role": role,
                "contact_details": get(f"{prefix}_contact"),
            })

    return ExtractedFields.model_validate({
        "policy_info": {
            "policy_number": get("policy_number"),
            "policyholder_name": get("policyholder_name"),
            "effective_date_start": get("effective_date_start"),
            "effective_date_end": get("effective_date_end"),
        },
        "incident_info": {
            "date": get("incident_date"),
            "time": get("incident_time"),
            "location": get("location"),
            "description": get("description"),
        },
        "involved_parties": parties,
        "asset_details": {
            "asset_type": get("asset_type"),
            "asset_id": get("asset_id"),
            "estimated_damage": _form_amount(get("estimated_damage"), "Estimated damage"),
        },
        "claim_type": get("claim_type"),
        "attachments": get("attachments"),
        "initial_estimate": _form_amount(get("initial_estimate"), "Initial estimate"),
    })
