"""
Routing logic for FNOL claims.
Evaluates a claim record and its missing fields against ordered business rules
and returns the recommended route + reasoning.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .schema import (
    ROUTE_FAST_TRACK,
    ROUTE_INVESTIGATION,
    ROUTE_MANUAL_REVIEW,
    ROUTE_SPECIALIST_QUEUE,
    ExtractedFields,
)

logger = logging.getLogger(__name__)

# Keywords that trigger investigation (case-insensitive substring match)
FRAUD_KEYWORDS = ("fraud", "inconsistent", "staged", "suspicious", "fabricated", "false")

INJURY_CLAIM_TYPES = frozenset({"injury", "personal injury"})

# Fast-track requires the effective estimate to be strictly below this
FAST_TRACK_DAMAGE_THRESHOLD = 25_000.0


@dataclass(frozen=True)
class RoutingDecision:
    """Result of routing evaluation."""

    recommended_route: str  # "fast-track", "manual-review", "investigation", "specialist-queue"
    reasoning: str
    rule: str  # "fraud_keywords", "missing_fields", "injury_claim", "below_threshold", "high_value"
    flags: Tuple[str, ...] = ()  # matched keywords or missing paths


def find_fraud_keywords(description: Optional[str]) -> List[str]:
    """Fraud keywords contained in the description, in FRAUD_KEYWORDS order."""
    lower = (description or "").lower()
    return [kw for kw in FRAUD_KEYWORDS if kw in lower]


def is_injury_claim(claim_type: Optional[str]) -> bool:
    """True if claim type is injury or personal injury (case-insensitive)."""
    if not claim_type:
        return False
    return claim_type.strip().lower() in INJURY_CLAIM_TYPES


def effective_estimate(fields: ExtractedFields) -> float:
    """Initial estimate, else the asset's estimated damage, else 0."""
    if fields.initial_estimate is not None:
        return fields.initial_estimate
    if fields.asset_details.estimated_damage is not None:
        return fields.asset_details.estimated_damage
    return 0.0


def format_amount(amount: float) -> str:
    """8500 -> '$8,500'; 1234.5 -> '$1,234.50'; 24999.999 -> '$24,999.999'."""
    if float(amount).is_integer():
        return f"${int(amount):,}"
    if round(amount, 2) == amount:
        return f"${amount:,.2f}"
    # Sub-cent amounts are shown unrounded
    return f"${amount:,}"


def route_claim(fields: ExtractedFields, missing: List[str]) -> RoutingDecision:
    """
    Evaluate the claim against the routing rules; the first rule that applies wins.
    Priority order: Investigation > Manual Review (missing fields) > Specialist >
    Fast-track > Manual Review (high value).
    """
    # 1) Fraud keywords in description -> Investigation
    keywords = find_fraud_keywords(fields.incident_info.description)
    if keywords:
        decision = RoutingDecision(
            recommended_route=ROUTE_INVESTIGATION,
            reasoning=(
                f"Description contains flagged keywords: {', '.join(keywords)}. "
                "Routing to investigation."
            ),
            rule="fraud_keywords",
            flags=tuple(keywords),
        )

    # 2) Mandatory fields missing -> Manual Review
    elif missing:
        decision = RoutingDecision(
            recommended_route=ROUTE_MANUAL_REVIEW,
            reasoning=(
                f"Missing mandatory fields: {', '.join(missing)}. "
                "Requires manual review to complete the claim."
            ),
            rule="missing_fields",
            flags=tuple(missing),
        )

    # 3) Injury claim -> Specialist Queue
    elif is_injury_claim(fields.claim_type):
        decision = RoutingDecision(
            recommended_route=ROUTE_SPECIALIST_QUEUE,
            reasoning=(
                f"Claim type is '{fields.claim_type}'. "
                "Routing to specialist queue for medical assessment."
            ),
            rule="injury_claim",
        )

    else:
        estimate = effective_estimate(fields)
        threshold = format_amount(FAST_TRACK_DAMAGE_THRESHOLD)

        # 4) Estimate < 25,000 -> Fast-track
        if estimate < FAST_TRACK_DAMAGE_THRESHOLD:
            decision = RoutingDecision(
                recommended_route=ROUTE_FAST_TRACK,
                reasoning=(
                    f"Estimated damage ({format_amount(estimate)}) is below the {threshold} "
                    "threshold. Eligible for fast-track processing."
                ),
                rule="below_threshold",
            )

        # Default: high-value claim still goes to a person
        else:
            decision = RoutingDecision(
                recommended_route=ROUTE_MANUAL_REVIEW,
                reasoning=(
                    f"Estimated damage ({format_amount(estimate)}) is at or above the {threshold} "
                    "threshold. Standard processing required via manual review."
                ),
                rule="high_value",
            )

    logger.info("Routed claim to %s (%s)", decision.recommended_route, decision.rule)
    return decision
