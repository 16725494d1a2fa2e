"""Tests for the claim processor and the sample records."""

import pytest

from fnol_claims.processor import process_claim, process_sample, process_text
from fnol_claims.schema import ClaimOutput

from .helpers import with_updates


def test_process_is_idempotent(complete_fields):
    first = process_claim(complete_fields)
    second = process_claim(complete_fields)
    assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)


def test_record_passes_through_unchanged(complete_fields):
    output = process_claim(complete_fields)
    assert isinstance(output, ClaimOutput)
    assert output.extracted_fields == complete_fields


def test_missing_estimate_routes_to_manual_review(complete_fields):
    output = process_claim(with_updates(complete_fields, initial_estimate=None))
    assert "initialEstimate" in output.missing_fields
    assert output.recommended_route == "manual-review"


def test_fraud_wording_overrides_small_estimate(complete_fields):
    fields = with_updates(
        complete_fields,
        incident_info={"description": "Vehicle damage inconsistent with physical evidence."},
        initial_estimate=5000.0,
    )
    output = process_claim(fields)
    assert output.missing_fields == ()
    assert output.recommended_route == "investigation"


def test_injury_with_high_estimate(complete_fields):
    fields = with_updates(complete_fields, claim_type="Injury", initial_estimate=45000.0)
    assert process_claim(fields).recommended_route == "specialist-queue"


@pytest.mark.parametrize(
    "name, route",
    [
        ("sample-auto-collision", "fast-track"),
        ("sample-injury-claim", "specialist-queue"),
        ("sample-fraud-flag", "investigation"),
        ("sample-incomplete", "manual-review"),
    ],
)
def test_samples(name, route):
    assert process_sample(name).recommended_route == route


def test_auto_collision_sample():
    output = process_sample("sample-auto-collision")
    assert output.extracted_fields.policy_info.policy_number == "POL-2024-00847"
    assert output.missing_fields == ()
    assert output.recommended_route == "fast-track"


def test_incomplete_sample_reasoning():
    output = process_sample("sample-incomplete")
    assert output.missing_fields == (
        "policyInfo.effectiveDateStart",
        "initialEstimate",
        "involvedParties",
    )
    assert "policyInfo.effectiveDateStart, initialEstimate, involvedParties" in output.reasoning


def test_fraud_sample_names_keywords():
    output = process_sample("sample-fraud-flag")
    assert "inconsistent, staged" in output.reasoning


def test_unknown_sample():
    with pytest.raises(KeyError, match="sample-auto-collision"):
        process_sample("sample-does-not-exist")


def test_process_text(sample_document_text):
    output = process_text(sample_document_text)
    assert output.missing_fields == ()
    assert output.recommended_route == "fast-track"
    assert "$8,500" in output.reasoning


def test_process_text_with_nothing_recognised():
    output = process_text("Hello, I would like to report a problem.")
    assert output.recommended_route == "manual-review"
    assert output.missing_fields[0] == "policyInfo.policyNumber"


def test_fraud_narrative_beats_later_damage_section():
    output = process_text(
        "Policy Number: POL-2024-00912 "
        "Incident Description: Staged rear-end collision, driver braked suddenly on purpose. "
        "Description of Damage: Rear bumper cracked and trunk lid dented. "
        "Claim Type: Auto Collision Initial Estimate: $8,500"
    )
    assert output.recommended_route == "investigation"
    assert "staged" in output.reasoning


def test_sample_records_cannot_be_changed_by_callers():
    output = process_sample("sample-auto-collision")
    with pytest.raises(AttributeError):
        output.extracted_fields.attachments.append("injected.pdf")
    with pytest.raises(AttributeError):
        output.missing_fields.append("claimType")

    again = process_sample("sample-auto-collision")
    assert again.extracted_fields.attachments == ("police_report.pdf", "photos_damage.zip")
    assert again.missing_fields == ()


def test_sequences_serialize_as_json_arrays():
    data = process_sample("sample-incomplete").model_dump(mode="json", by_alias=True)
    assert data["missingFields"] == ["policyInfo.effectiveDateStart", "initialEstimate", "involvedParties"]
    assert data["extractedFields"]["involvedParties"] == []
