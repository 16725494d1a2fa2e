"""Shared fixtures for the FNOL test suite."""

from pathlib import Path

import pytest

from fnol_claims.samples import SAMPLE_FNOL_DATA
from fnol_claims.schema import ExtractedFields

PROJECT_ROOT = Path(__file__).resolve().parent.parent

SINGLE_LINE_FNOL = (
    "Policy Number: POL-2024-00847 Policyholder Name: Sarah Mitchell, "
    "Effective From: 01/15/2024 Effective To: 01/15/2025 "
    "Incident Date: 11/20/2025 Incident Time: 14:35 "
    "Incident Location: 5th Avenue & Main Street, Springfield, IL "
    "Description: Rear-end collision at traffic signal while stopped at a red light. "
    "Claim Type: Auto Collision Asset Type: Vehicle Asset ID: VIN-1HGCM82633A004352 "
    "Estimated Damage: $8,500.00 Initial Estimate: $8,500 "
    "Claimant: Sarah Mitchell, Contact: sarah.mitchell@email.com | "
    "Third Party: James Peterson, Phone: (555) 987-6543 | "
    "Attachments: police_report.pdf, photos_damage.zip"
)


@pytest.fixture
def single_line_fnol() -> str:
    return SINGLE_LINE_FNOL


@pytest.fixture
def sample_document_text() -> str:
    return (PROJECT_ROOT / "sample_fnol_full.txt").read_text(encoding="utf-8")


@pytest.fixture
def complete_fields() -> ExtractedFields:
    """A clean, complete auto-collision claim with an $8,500 estimate."""
    return SAMPLE_FNOL_DATA["sample-auto-collision"]

