"""
Pattern library for FNOL field extraction.

Each field maps to an ordered tuple of FieldRule objects. Patterns are written
against whitespace-normalized text (one line), and the first rule that yields
a value wins.
"""

import math
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Optional, Sequence

_I = re.IGNORECASE


@dataclass(frozen=True)
class FieldRule:
    """A compiled pattern plus an optional converter for the captured text."""

    pattern: re.Pattern
    convert: Optional[Callable[[str], Any]] = None

    def apply(self, text: str) -> Any:
        """Return the value this rule yields for text, or None."""
        match = self.pattern.search(text)
        if match is None:
            return None
        if self.pattern.groups and match.group(1):
            value = match.group(1).strip()
        else:
            value = match.group(0).strip()
        if not value:
            return None
        if self.convert is not None:
            return self.convert(value)
        return value


def first_match(rules: Sequence[FieldRule], text: str) -> Any:
    """Evaluate rules in order; the first non-None value wins."""
    for rule in rules:
        value = rule.apply(text)
        if value is not None:
            return value
    return None


def parse_amount(value: str) -> Optional[float]:
    """'8,500.00' -> 8500.0. Anything that is not a finite number gives None."""
    try:
        amount = float(value.replace(",", ""))
    except ValueError:
        return None
    if not math.isfinite(amount):
        return None
    return amount


def _rule(pattern: str, flags: int = _I, convert=None) -> FieldRule:
    return FieldRule(re.compile(pattern, flags), convert)


# --- Building blocks ---

# Capitalized words that are form labels, never part of a person's name.
LABEL_WORDS = (
    "Policyholder", "Policy", "Insured", "Claimant", "Name", "Effective",
    "Coverage", "Expiration", "Incident", "Loss", "Accident", "Occurrence",
    "Date", "Time", "Location", "Description", "Claim", "Type", "Asset",
    "Vehicle", "Estimated", "Damage", "Initial", "Total", "Third", "Contact",
    "Email", "Phone", "Tel", "Involved", "Parties", "Attachments",
)

# Firstname Lastname [Middle], case-sensitive even inside IGNORECASE patterns.
NAME = r"(?-i:([A-Z][a-z]+ [A-Z][a-z]+(?:\s(?!(?:%s)\b)[A-Z][a-z]+)?))" % "|".join(LABEL_WORDS)

DATE_DMY = r"(\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4})"
DATE_ISO = r"(\d{4}-\d{2}-\d{2})"
TIME = r"(\d{1,2}:\d{2}(?:\s*[ap]m)?)"
AMOUNT = r"\$?([\d,]+(?:\.\d{2})?)"
TOKEN = r"([A-Z0-9][\w-]{3,30})"

INCIDENT_WORDS = r"(?:incident|loss|accident|occurrence)"
LOCATION_END = (
    r"(?=\s*(?:(?:incident|loss|accident)\s*)?(?:description|claim|type|damage|date|time)|\s*$)"
)
DESCRIPTION_END = r"(?=\s*(?:claim\s*type|asset|estimated|involved|parties|attachments|$))"

CLAIM_TYPES = (
    r"(auto\s*collision|property\s*damage|injury|personal\s*injury|theft"
    r"|natural\s*disaster|fire|flood|liability)"
)


# --- Scalar field rules, keyed by dotted output path ---

FIELD_RULES = MappingProxyType({
    "policyInfo.policyNumber": (
        _rule(r"policy\s*(?:number|no|#|id)[:\s]*([A-Z0-9][\w-]{3,20})"),
        _rule(r"POL-\d{4}-\d{3,6}", flags=0),
    ),
    "policyInfo.policyholderName": (
        _rule(r"policy\s*holder(?:\s*name)?[:\s]*" + NAME),
        _rule(r"insured(?:\s*name)?[:\s]*" + NAME),
        _rule(r"claimant(?:\s*name)?[:\s]*" + NAME),
        _rule(r"name[:\s]*" + NAME),
    ),
    "policyInfo.effectiveDateStart": (
        _rule(r"effective\s*(?:from|start|date)(?:\s*date)?[:\s]*" + DATE_DMY),
        _rule(r"effective\s*(?:from|start|date)(?:\s*date)?[:\s]*" + DATE_ISO),
        _rule(r"coverage\s*(?:from|start)[:\s]*" + DATE_DMY),
    ),
    "policyInfo.effectiveDateEnd": (
        _rule(r"effective\s*(?:to|end|through|until)(?:\s*date)?[:\s]*" + DATE_DMY),
        _rule(r"effective\s*(?:to|end|through|until)(?:\s*date)?[:\s]*" + DATE_ISO),
        _rule(r"expir(?:ation|es|y)\s*(?:date)?[:\s]*" + DATE_DMY),
    ),
    "incidentInfo.date": (
        _rule(INCIDENT_WORDS + r"\s*date[:\s]*" + DATE_DMY),
        _rule(INCIDENT_WORDS + r"\s*date[:\s]*" + DATE_ISO),
        _rule(r"date\s*of\s*" + INCIDENT_WORDS + r"[:\s]*" + DATE_DMY),
        _rule(r"date\s*of\s*" + INCIDENT_WORDS + r"[:\s]*" + DATE_ISO),
    ),
    "incidentInfo.time": (
        _rule(INCIDENT_WORDS + r"\s*time[:\s]*" + TIME),
        _rule(r"time\s*of\s*(?:incident|loss|accident)[:\s]*" + TIME),
        _rule(r"time[:\s]*" + TIME),
    ),
    "incidentInfo.location": (
        _rule(r"(?:incident|loss|accident)\s*location[:\s]*(.{10,100}?)" + LOCATION_END),
        _rule(r"location\s*of\s*(?:incident|loss|accident)[:\s]*(.{10,100}?)" + LOCATION_END),
        _rule(r"location[:\s]*(.{10,80}?)" + LOCATION_END),
    ),
    "incidentInfo.description": (
        _rule(r"(?:incident\s*)?description(?!\s*of\b)[:\s]*(.{20,500}?)" + DESCRIPTION_END),
        _rule(r"description\s*of\s*(?:incident|loss|accident|damage)[:\s]*(.{20,500}?)" + DESCRIPTION_END),
    ),
    "assetDetails.assetType": (
        _rule(r"asset\s*type[:\s]*(vehicle|property|equipment|n/a)"),
        _rule(r"type\s*of\s*asset[:\s]*(vehicle|property|equipment)"),
    ),
    "assetDetails.assetId": (
        _rule(r"asset\s*id[:\s]*" + TOKEN),
        _rule(r"vin[:\s#]*([A-Z0-9]{17})"),
        _rule(r"VIN-([A-Z0-9]{17})", flags=0),
        _rule(r"vehicle\s*id[:\s]*" + TOKEN),
    ),
    "assetDetails.estimatedDamage": (
        _rule(r"estimated\s*damage[:\s]*" + AMOUNT, convert=parse_amount),
        _rule(r"damage\s*estimate[:\s]*" + AMOUNT, convert=parse_amount),
    ),
    "claimType": (
        _rule(r"claim\s*type[:\s]*" + CLAIM_TYPES),
        _rule(r"type\s*of\s*claim[:\s]*" + CLAIM_TYPES),
    ),
    "initialEstimate": (
        _rule(r"initial\s*estimate[:\s]*" + AMOUNT, convert=parse_amount),
        _rule(r"estimated\s*(?:total|cost|amount)[:\s]*" + AMOUNT, convert=parse_amount),
        _rule(r"total\s*estimate[:\s]*" + AMOUNT, convert=parse_amount),
    ),
})


# --- Involved parties ---

CLAIMANT = re.compile(r"claimant(?:\s*name)?[:\s]*" + NAME, _I)
THIRD_PARTY = re.compile(r"third\s*party(?:\s*name)?[:\s]*" + NAME, _I)

CONTACT_MIN_LENGTH = 5

# A contact capture stops at the first following form label.
_NEXT_LABEL = re.compile(
    r"\s(?:third\s*party|claimant|policy|incident|asset|claim|estimated|initial"
    r"|attachments|description|location|contact|email|phone|tel)\b",
    _I,
)


def _cut_at_next_label(value: str) -> Optional[str]:
    label = _NEXT_LABEL.search(value)
    if label is not None:
        value = value[:label.start()]
    value = value.strip()
    if len(value) < CONTACT_MIN_LENGTH:
        return None
    return value


CONTACT = FieldRule(
    re.compile(r"(?:contact|email|phone|tel)[:\s]*([\w.@+\-()\s]{%d,60})" % CONTACT_MIN_LENGTH, _I),
    _cut_at_next_label,
)

PARTY_RULES = (
    ("claimant", CLAIMANT),
    ("third-party", THIRD_PARTY),
)


# --- Attachments ---

ATTACHMENT = re.compile(r"[\w-]+\.(?:pdf|jpg|jpeg|png|zip|doc|docx|xls|xlsx)\b", _I)
