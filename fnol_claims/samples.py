"""Named sample FNOL records for demos and manual testing."""

from types import MappingProxyType

from .schema import ExtractedFields

_SAMPLES = {
    "sample-auto-collision": {
        "policyInfo": {
            "policyNumber": "POL-2024-00847",
            "policyholderName": "Sarah Mitchell",
            "effectiveDateStart": "2024-01-15",
            "effectiveDateEnd": "2025-01-15",
        },
        "incidentInfo": {
            "date": "2025-11-20",
            "time": "14:35",
            "location": "5th Avenue & Main Street, Springfield, IL",
            "description": (
                "Rear-end collision at traffic signal. Vehicle was stopped at red light "
                "when struck from behind by another vehicle. Moderate damage to rear "
                "bumper and trunk."
            ),
        },
        "involvedParties": [
            {
                "name": "Sarah Mitchell",
                "role": "claimant",
                "contactDetails": "sarah.mitchell@email.com | (555) 123-4567",
            },
            {
                "name": "James Peterson",
                "role": "third-party",
                "contactDetails": "j.peterson@email.com | (555) 987-6543",
            },
        ],
        "assetDetails": {
            "assetType": "Vehicle",
            "assetId": "VIN-1HGCM82633A004352",
            "estimatedDamage": 8500,
        },
        "claimType": "Auto Collision",
        "attachments": ["police_report.pdf", "photos_damage.zip"],
        "initialEstimate": 8500,
    },
    "sample-injury-claim": {
        "policyInfo": {
            "policyNumber": "POL-2024-01234",
            "policyholderName": "Michael Chen",
            "effectiveDateStart": "2024-03-01",
            "effectiveDateEnd": "2025-03-01",
        },
        "incidentInfo": {
            "date": "2025-12-05",
            "time": "09:15",
            "location": "Warehouse B, Industrial Park, Chicago, IL",
            "description": (
                "Workplace slip and fall on wet floor. Employee sustained back injury "
                "and was transported to hospital for evaluation."
            ),
        },
        "involvedParties": [
            {
                "name": "Michael Chen",
                "role": "claimant",
                "contactDetails": "mchen@company.com | (555) 234-5678",
            },
        ],
        "assetDetails": {"assetType": "N/A", "assetId": None, "estimatedDamage": 45000},
        "claimType": "Injury",
        "attachments": ["medical_report.pdf", "incident_form.pdf"],
        "initialEstimate": 45000,
    },
    "sample-fraud-flag": {
        "policyInfo": {
            "policyNumber": "POL-2024-05678",
            "policyholderName": "Robert Davis",
            "effectiveDateStart": "2024-06-10",
            "effectiveDateEnd": "2025-06-10",
        },
        "incidentInfo": {
            "date": "2025-10-15",
            "time": "23:45",
            "location": "Rural Highway 12, outside Greenfield, IN",
            "description": (
                "Single vehicle incident reported. Circumstances appear inconsistent with "
                "physical evidence. Witness accounts suggest staged collision for "
                "insurance purposes."
            ),
        },
        "involvedParties": [
            {
                "name": "Robert Davis",
                "role": "claimant",
                "contactDetails": "rdavis@email.com | (555) 345-6789",
            },
        ],
        "assetDetails": {
            "assetType": "Vehicle",
            "assetId": "VIN-5YJSA1E26HF000316",
            "estimatedDamage": 32000,
        },
        "claimType": "Auto Collision",
        "attachments": ["police_report.pdf"],
        "initialEstimate": 32000,
    },
    "sample-incomplete": {
        "policyInfo": {
            "policyNumber": "POL-2024-09999",
            "policyholderName": "Lisa Wong",
            "effectiveDateStart": None,
            "effectiveDateEnd": None,
        },
        "incidentInfo": {
            "date": "2025-12-01",
            "time": None,
            "location": "742 Elm Street, Portland, OR",
            "description": (
                "Water damage from burst pipe in basement. Flooding affected furniture "
                "and electronics."
            ),
        },
        "involvedParties": [],
        "assetDetails": {"assetType": "Property", "assetId": None, "estimatedDamage": 15000},
        "claimType": "Property Damage",
        "attachments": [],
        "initialEstimate": None,
    },
}

SAMPLE_FNOL_DATA = MappingProxyType(
    {name: ExtractedFields.model_validate(data) for name, data in _SAMPLES.items()}
)

SAMPLE_LABELS = MappingProxyType({
    "sample-auto-collision": "Auto collision (fast-track)",
    "sample-injury-claim": "Workplace injury (specialist queue)",
    "sample-fraud-flag": "Suspicious collision (investigation)",
    "sample-incomplete": "Burst pipe, incomplete (manual review)",
})
