"""Tests for the standard output and the form helpers."""

import json

import pytest

from fnol_claims.output_format import (
    FORM_SECTIONS,
    ROUTE_CONFIG,
    build_standard_output,
    fields_from_form,
    get_field_value_for_form,
    to_json,
)
from fnol_claims.processor import process_claim, process_sample


def test_standard_output_shape():
    output = build_standard_output(process_sample("sample-auto-collision"))
    assert list(output) == ["extractedFields", "missingFields", "recommendedRoute", "reasoning"]
    assert output["recommendedRoute"] == "fast-track"
    assert output["extractedFields"]["assetDetails"]["assetId"] == "VIN-1HGCM82633A004352"
    assert output["extractedFields"]["involvedParties"][1]["role"] == "third-party"
    assert output["extractedFields"]["involvedParties"][0]["contactDetails"].startswith("sarah")


def test_to_json_round_trips():
    output = process_sample("sample-incomplete")
    assert json.loads(to_json(output)) == build_standard_output(output)


def test_every_route_has_display_config():
    assert set(ROUTE_CONFIG) == {"fast-track", "manual-review", "investigation", "specialist-queue"}


def test_form_values(complete_fields):
    assert get_field_value_for_form(complete_fields, "Policy Number") == "POL-2024-00847"
    assert get_field_value_for_form(complete_fields, "Third Party") == "James Peterson"
    assert get_field_value_for_form(complete_fields, "Initial Estimate") == "$8,500.00"
    assert get_field_value_for_form(complete_fields, "Attachments") == "police_report.pdf, photos_damage.zip"


def test_form_placeholder_for_missing():
    doc = process_sample("sample-incomplete").extracted_fields
    assert get_field_value_for_form(doc, "Effective Date Start") == "—"
    assert get_field_value_for_form(doc, "Claimant") == "—"
    assert get_field_value_for_form(doc, "Attachments") == "—"


def test_form_unknown_label(complete_fields):
    with pytest.raises(KeyError):
        get_field_value_for_form(complete_fields, "Shoe Size")


def test_form_labels_are_unique():
    labels = [label for _, rows in FORM_SECTIONS for label, _, _ in rows]
    assert len(labels) == len(set(labels))


class TestFieldsFromForm:
    def test_blank_form(self):
        fields = fields_from_form({"policy_number": "", "initial_estimate": "", "claimant_name": ""})
        assert fields.policy_info.policy_number is None
        assert fields.initial_estimate is None
        assert fields.involved_parties == ()
        assert fields.attachments == ()

    def test_filled_form_routes_like_sample(self):
        fields = fields_from_form({
            "policy_number": "POL-2024-00847",
            "policyholder_name": "Sarah Mitchell",
            "effective_date_start": "2024-01-15",
            "incident_date": "2025-11-20",
            "location": "5th Avenue & Main Street, Springfield, IL",
            "description": "Rear-end collision at traffic signal.",
            "claimant_name": "Sarah Mitchell",
            "claimant_contact": "sarah.mitchell@email.com",
            "third_party_name": "",
            "asset_type": "Vehicle",
            "estimated_damage": "$8,500",
            "claim_type": "Auto Collision",
            "attachments": "police_report.pdf, photos_damage.zip",
            "initial_estimate": "8500",
        })
        assert [p.role for p in fields.involved_parties] == ["claimant"]
        assert fields.asset_details.estimated_damage == 8500.0
        assert fields.attachments == ("police_report.pdf", "photos_damage.zip")
        output = process_claim(fields)
        assert output.missing_fields == ()
        assert output.recommended_route == "fast-track"

    def test_invalid_amount(self):
        with pytest.raises(ValueError, match="Initial estimate"):
            fields_from_form({"initial_estimate": "about ten grand"})
