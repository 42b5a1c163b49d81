"""
API tests for the admission webhook and the runner endpoints.
"""
from datetime import timedelta

import pytest

from tests.factories import FIXED_NOW, registered_status, runner_document

WEBHOOK_PATH = "/validate-actions-summerwind-dev-v1alpha1-runner"


def admission_review(operation="CREATE", obj=None, uid="req-1", name="runner-1", namespace="default"):
    return {
        "apiVersion": "admission.k8s.io/v1",
        "kind": "AdmissionReview",
        "request": {
            "uid": uid,
            "kind": {"group": "actions.summerwind.dev", "version": "v1alpha1", "kind": "Runner"},
            "operation": operation,
            "name": name,
            "namespace": namespace,
            "object": obj,
        },
    }


class TestValidationWebhook:
    """Tests for the AdmissionReview endpoint."""

    def test_allows_valid_runner(self, client):
        """A runner with exactly one scope is admitted."""
        review = admission_review(obj=runner_document({"repository": "acme/app"}))

        response = client.post(WEBHOOK_PATH, json=review)

        assert response.status_code == 200
        body = response.json()
        assert body["apiVersion"] == "admission.k8s.io/v1"
        assert body["kind"] == "AdmissionReview"
        assert body["response"] == {"uid": "req-1", "allowed": True}

    def test_denies_with_all_causes(self, client):
        """Both rule violations are reported in order."""
        spec = {"organization": "acme", "repository": "acme/app", "containerMode": "kubernetes"}
        review = admission_review(operation="UPDATE", obj=runner_document(spec))

        body = client.post(WEBHOOK_PATH, json=review).json()["response"]

        assert body["allowed"] is False
        status = body["status"]
        assert status["code"] == 422
        assert status["reason"] == "Invalid"
        assert status["message"].startswith('Runner.actions.summerwind.dev "runner-1" is invalid: [')
        causes = status["details"]["causes"]
        assert [c["field"] for c in causes] == ["spec.repository", "spec.workVolumeClaimTemplate"]
        assert causes[0]["type"] == "FieldValueInvalid"
        assert causes[0]["message"] == (
            'Invalid value: "acme/app": enterprise, organization, repository are mutually exclusive'
        )
        assert causes[1]["message"].endswith(
            "workVolumeClaimTemplate is required when containerMode is kubernetes"
        )

    def test_delete_is_always_allowed(self, client):
        """DELETE does not run the validator."""
        review = admission_review(operation="DELETE", obj=None)

        body = client.post(WEBHOOK_PATH, json=review).json()["response"]

        assert body == {"uid": "req-1", "allowed": True}

    def test_unknown_kind_is_bad_request(self, client):
        """An object of an unregistered kind is denied with code 400."""
        obj = runner_document({"repository": "acme/app"})
        obj["kind"] = "RunnerSet"

        body = client.post(WEBHOOK_PATH, json=admission_review(obj=obj)).json()["response"]

        assert body["allowed"] is False
        assert body["status"]["code"] == 400
        assert body["status"]["reason"] == "BadRequest"

    def test_other_registered_kind_is_bad_request(self, client):
        """A RunnerList submitted to the Runner webhook is denied with code 400."""
        obj = {
            "apiVersion": "actions.summerwind.dev/v1alpha1",
            "kind": "RunnerList",
            "items": [runner_document({"repository": "acme/app"})],
        }

        response = client.post(WEBHOOK_PATH, json=admission_review(obj=obj))

        assert response.status_code == 200
        body = response.json()["response"]
        assert body["allowed"] is False
        assert body["status"]["code"] == 400
        assert body["status"]["reason"] == "BadRequest"
        assert "RunnerList" in body["status"]["message"]

    def test_null_metadata_gets_request_namespace(self, client):
        """An object with metadata null is decoded with the request namespace."""
        obj = runner_document({"repository": "acme/app"})
        obj["metadata"] = None

        response = client.post(WEBHOOK_PATH, json=admission_review(obj=obj, namespace="ci"))

        assert response.status_code == 200
        assert response.json()["response"] == {"uid": "req-1", "allowed": True}

    def test_non_mapping_metadata_is_bad_request(self, client):
        """Metadata that is not a mapping cannot be decoded."""
        obj = runner_document({"repository": "acme/app"})
        obj["metadata"] = "runner-1"

        body = client.post(WEBHOOK_PATH, json=admission_review(obj=obj)).json()["response"]

        assert body["allowed"] is False
        assert body["status"]["code"] == 400

    def test_malformed_review_rejected(self, client):
        """A review without request is a request validation error."""
        response = client.post(WEBHOOK_PATH, json={"apiVersion": "admission.k8s.io/v1"})
        assert response.status_code == 422


class TestRunnerEndpoints:
    """Tests for /api/v1/runners."""

    def test_validate_valid(self, client):
        """A valid runner reports no errors."""
        response = client.post("/api/v1/runners/validate", json=runner_document({"enterprise": "acme-corp"}))

        assert response.status_code == 200
        assert response.json() == {"valid": True, "errors": [], "message": ""}

    def test_validate_reports_errors(self, client):
        """Scenario with no scope reports the repository path."""
        response = client.post("/api/v1/runners/validate", json=runner_document({}))

        body = response.json()
        assert body["valid"] is False
        assert len(body["errors"]) == 1
        assert body["errors"][0]["field"] == "spec.repository"
        assert body["errors"][0]["detail"] == "must specify exactly one of enterprise, organization, repository"
        assert body["message"] == (
            'Runner.actions.summerwind.dev "runner-1" is invalid: spec.repository: '
            'Invalid value: "": must specify exactly one of enterprise, organization, repository'
        )

    def test_validate_undecodable(self, client):
        """A document violating field formats is a bad request."""
        response = client.post("/api/v1/runners/validate", json=runner_document({"repository": "no-slash"}))
        assert response.status_code == 400

    def test_validate_other_kind(self, client):
        """A registered kind other than Runner is a bad request."""
        document = {"apiVersion": "actions.summerwind.dev/v1alpha1", "kind": "RunnerList", "items": []}

        response = client.post("/api/v1/runners/validate", json=document)

        assert response.status_code == 400

    def test_work_volume(self, client, valid_template):
        """A valid template yields the work volume and mount."""
        response = client.post(
            "/api/v1/runners/work-volume",
            json={"workVolumeClaimTemplate": valid_template, "mountPath": "/runner/_work"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["volume"]["name"] == "work"
        claim_spec = body["volume"]["ephemeral"]["volumeClaimTemplate"]["spec"]
        assert claim_spec["accessModes"] == ["ReadWriteOnce"]
        assert claim_spec["storageClassName"] == "standard"
        assert body["volumeMount"] == {"name": "work", "mountPath": "/runner/_work"}

    def test_work_volume_invalid_template(self, client):
        """An unsupported access mode is rejected with 422."""
        response = client.post(
            "/api/v1/runners/work-volume",
            json={"workVolumeClaimTemplate": {"accessModes": ["ReadOnlyMany"]}, "mountPath": "/w"},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == "access mode ReadOnlyMany is not supported"

    def test_registration_uses_app_clock(self, client):
        """Registerability is evaluated against the application clock."""
        document = runner_document({"repository": "acme/app"}, registered_status())

        body = client.post("/api/v1/runners/registration", json=document).json()

        assert body["registerable"] is True

    def test_registration_expired(self, client):
        """An expired token is reported with its reason."""
        document = runner_document(
            {"repository": "acme/app"},
            registered_status(expires_at=FIXED_NOW - timedelta(minutes=1)),
        )

        body = client.post("/api/v1/runners/registration", json=document).json()

        assert body == {"registerable": False, "reason": "registration token has expired"}


class TestSystemEndpoints:
    """Tests for /api/v1/system."""

    def test_health(self, client):
        """Health reports version and environment."""
        body = client.get("/api/v1/system/health").json()

        assert body["status"] == "healthy"
        assert body["version"] == "0.1.0"
        assert body["environment"] == "development"
        assert body["uptimeSeconds"] >= 0

    @pytest.mark.parametrize("kind", ["Runner", "RunnerList"])
    def test_kinds(self, client, kind):
        """Registered kinds are listed."""
        kinds = client.get("/api/v1/system/kinds").json()["kinds"]
        assert {"apiVersion": "actions.summerwind.dev/v1alpha1", "kind": kind} in kinds
