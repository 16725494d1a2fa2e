"""
FNOL Claims Processing Agent.
Rule-based FNOL extraction, completeness checking, and routing.
"""

from .completeness import find_missing_fields
from .errors import UnsupportedInputError
from .extractor import extract_fields
from .processor import process_claim, process_sample, process_text
from .router import RoutingDecision, route_claim
from .schema import (
    AssetDetails,
    ClaimOutput,
    ExtractedFields,
    IncidentInfo,
    InvolvedParty,
    PolicyInfo,
)

__all__ = [
    "AssetDetails",
    "ClaimOutput",
    "ExtractedFields",
    "IncidentInfo",
    "InvolvedParty",
    "PolicyInfo",
    "RoutingDecision",
    "UnsupportedInputError",
    "extract_fields",
    "find_missing_fields",
    "process_claim",
    "process_sample",
    "process_text",
    "route_claim",
]
