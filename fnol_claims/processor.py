"""
Claim processor: completeness check + routing over a claim record,
optionally preceded by extraction from text.
"""

import logging

from .completeness import find_missing_fields
from .extractor import extract_fields
from .router import route_claim
from .samples import SAMPLE_FNOL_DATA
from .schema import ClaimOutput, ExtractedFields

logger = logging.getLogger(__name__)


def process_claim(fields: ExtractedFields) -> ClaimOutput:
    """Check completeness, route, and bundle the result."""
    missing = find_missing_fields(fields)
    decision = route_claim(fields, missing)
    return ClaimOutput(
        extracted_fields=fields,
        missing_fields=missing,
        recommended_route=decision.recommended_route,
        reasoning=decision.reasoning,
    )


def process_text(raw_text: str) -> ClaimOutput:
    """Extract fields from FNOL text, then process them."""
    return process_claim(extract_fields(raw_text))


def process_sample(name: str) -> ClaimOutput:
    """Process one of the named sample records."""
    try:
        fields = SAMPLE_FNOL_DATA[name]
    except KeyError:
        raise KeyError(
            f"Unknown sample {name!r}. Available: {', '.join(SAMPLE_FNOL_DATA)}"
        ) from None
    logger.info("Processing sample claim %s", name)
    return process_claim(fields)
