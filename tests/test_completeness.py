"""Tests for the mandatory-field completeness check."""

from fnol_claims.completeness import MANDATORY_FIELD_PATHS, find_missing_fields
from fnol_claims.samples import SAMPLE_FNOL_DATA
from fnol_claims.schema import ExtractedFields

from .helpers import with_updates


def test_complete_claim_has_nothing_missing(complete_fields):
    assert find_missing_fields(complete_fields) == []


def test_empty_record_reports_everything_in_order():
    assert find_missing_fields(ExtractedFields()) == [
        "policyInfo.policyNumber",
        "policyInfo.policyholderName",
        "policyInfo.effectiveDateStart",
        "incidentInfo.date",
        "incidentInfo.location",
        "incidentInfo.description",
        "claimType",
        "initialEstimate",
        "involvedParties",
        "assetDetails.assetType",
    ]


def test_mandatory_paths_table():
    assert MANDATORY_FIELD_PATHS[0] == "policyInfo.policyNumber"
    assert MANDATORY_FIELD_PATHS[-1] == "initialEstimate"
    assert len(MANDATORY_FIELD_PATHS) == 8


def test_incomplete_sample():
    missing = find_missing_fields(SAMPLE_FNOL_DATA["sample-incomplete"])
    assert missing == ["policyInfo.effectiveDateStart", "initialEstimate", "involvedParties"]


def test_zero_estimate_is_present(complete_fields):
    fields = with_updates(complete_fields, initial_estimate=0.0)
    assert find_missing_fields(fields) == []


def test_empty_string_counts_as_missing(complete_fields):
    fields = with_updates(complete_fields, policy_info={"policy_number": ""}, claim_type="")
    assert find_missing_fields(fields) == ["policyInfo.policyNumber", "claimType"]


def test_asset_type_only_missing_when_none(complete_fields):
    blank = with_updates(complete_fields, asset_details={"asset_type": ""})
    assert find_missing_fields(blank) == []

    absent = with_updates(complete_fields, asset_details={"asset_type": None})
    assert find_missing_fields(absent) == ["assetDetails.assetType"]


def test_optional_fields_are_not_checked(complete_fields):
    fields = with_updates(
        complete_fields,
        policy_info={"effective_date_end": None},
        incident_info={"time": None},
        asset_details={"asset_id": None, "estimated_damage": None},
        attachments=[],
    )
    assert find_missing_fields(fields) == []
