"""
Completeness check for FNOL claim records.
Reports the mandatory fields a claim is missing, as dotted output paths.
"""

from typing import Any, Callable, List, Tuple

from .schema import ExtractedFields

# Mandatory fields, in reporting order (path -> accessor).
MANDATORY_FIELDS: Tuple[Tuple[str, Callable[[ExtractedFields], Any]], ...] = (
    ("policyInfo.policyNumber", lambda f: f.policy_info.policy_number),
    ("policyInfo.policyholderName", lambda f: f.policy_info.policyholder_name),
    ("policyInfo.effectiveDateStart", lambda f: f.policy_info.effective_date_start),
    ("incidentInfo.date", lambda f: f.incident_info.date),
    ("incidentInfo.location", lambda f: f.incident_info.location),
    ("incidentInfo.description", lambda f: f.incident_info.description),
    ("claimType", lambda f: f.claim_type),
    ("initialEstimate", lambda f: f.initial_estimate),
)

MANDATORY_FIELD_PATHS = tuple(path for path, _ in MANDATORY_FIELDS)


def _is_missing(value: Any) -> bool:
    # 0 is a valid amount
    return value is None or value == ""


def find_missing_fields(fields: ExtractedFields) -> List[str]:
    """
    Return the missing mandatory field paths in fixed order:
    the mandatory set, then involvedParties, then assetDetails.assetType.
    """
    missing: List[str] = [
        path for path, getter in MANDATORY_FIELDS if _is_missing(getter(fields))
    ]
    if not fields.involved_parties:
        missing.append("involvedParties")
    # Only None counts here, unlike the mandatory set above.
    if fields.asset_details.asset_type is None:
        missing.append("assetDetails.assetType")
    return missing
