"""Example: read and update a Patient through HttpClient against a mocked server.

Usage:
    python examples/read_patient.py
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import requests_mock

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fhir_http import HttpClient, ResponseError


BASE_URL = "https://fhir.example.com/r4"
PATIENT = {"resourceType": "Patient", "id": "patient-123", "active": True}


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    print("=== FHIR HTTP Client Demo ===\n")

    client = HttpClient(BASE_URL, custom_headers={"X-Tenant": "demo"})
    client.bearer_token = "demo-token"

    with requests_mock.Mocker() as m:
        m.get(f"{BASE_URL}/Patient/patient-123", json=PATIENT)
        m.put(f"{BASE_URL}/Patient/patient-123", json={**PATIENT, "active": False})
        m.get(
            f"{BASE_URL}/Patient/missing",
            status_code=404,
            json={"resourceType": "OperationOutcome", "issue": [{"severity": "error", "code": "not-found"}]},
        )

        # 1. Read
        patient = client.get("/Patient/patient-123")
        print("Read:", json.dumps(patient))

        # 2. Update
        updated = client.put("Patient/patient-123", {**patient, "active": False})
        print("Updated:", json.dumps(updated))

        # 3. Failure surfaces as ResponseError
        try:
            client.get("Patient/missing")
        except ResponseError as error:
            print(f"Failed: {error}")
            print("  status:", error.response.status)
            print("  data:  ", json.dumps(error.response.data))


if __name__ == "__main__":
    main()
