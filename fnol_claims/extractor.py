"""
FNOL field extraction: plain text in, ExtractedFields out.
Ordered pattern rules from patterns.py, first match wins per field.
"""

import logging
import re
from typing import List

from .errors import UnsupportedInputError
from .patterns import ATTACHMENT, CONTACT, FIELD_RULES, PARTY_RULES, first_match
from .schema import ExtractedFields, InvolvedParty

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_text(raw_text: str) -> str:
    """Collapse every whitespace run (newlines included) to a single space."""
    return _WHITESPACE.sub(" ", raw_text)


def extract_involved_parties(text: str) -> List[InvolvedParty]:
    """
    Find at most one claimant and one third party.
    Contact details are looked up in the text after the party's name.
    """
    parties: List[InvolvedParty] = []
    for role, pattern in PARTY_RULES:
        match = pattern.search(text)
        if match is None:
            continue
        parties.append(
            InvolvedParty(
                name=match.group(1).strip(),
                role=role,
                contact_details=CONTACT.apply(text[match.end():]),
            )
        )
    return parties


def extract_attachments(text: str) -> List[str]:
    """Filename-shaped tokens, each once, in first-seen order."""
    return list(dict.fromkeys(m.group(0) for m in ATTACHMENT.finditer(text)))


def extract_fields(raw_text: str) -> ExtractedFields:
    """
    Extract a structured claim record from FNOL text.
    Unmatched fields are None; only non-text input raises.
    """
    if not isinstance(raw_text, str):
        raise UnsupportedInputError(
            f"FNOL extraction needs text, got {type(raw_text).__name__}"
        )
    text = normalize_text(raw_text)

    data: dict = {}
    for path, rules in FIELD_RULES.items():
        section, _, name = path.rpartition(".")
        target = data.setdefault(section, {}) if section else data
        target[name] = first_match(rules, text)

    data["involvedParties"] = extract_involved_parties(text)
    data["attachments"] = extract_attachments(text)

    found = sum(1 for path in FIELD_RULES if _lookup(data, path) is not None)
    logger.debug(
        "Extracted %d/%d scalar fields, %d parties, %d attachments",
        found,
        len(FIELD_RULES),
        len(data["involvedParties"]),
        len(data["attachments"]),
    )
    return ExtractedFields.model_validate(data)


def _lookup(data: dict, path: str):
    section, _, name = path.rpartition(".")
    return (data[section] if section else data)[name]
