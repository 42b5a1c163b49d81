"""
Unit tests for the explicit kind registry.
"""
import pytest

from runnerspec.domain.entities import Runner, RunnerList
from runnerspec.infrastructure.scheme import Scheme, new_scheme
from runnerspec.shared.domain_exceptions import UnknownKindError
from runnerspec.shared.infrastructure_exceptions import DecodeError

from tests.factories import runner_document


class TestScheme:
    """Tests for Scheme registration, decoding and encoding."""

    def test_new_scheme_registers_runner_kinds(self):
        """new_scheme knows Runner and RunnerList."""
        scheme = new_scheme()

        assert scheme.known_kinds() == [
            ("actions.summerwind.dev/v1alpha1", "Runner"),
            ("actions.summerwind.dev/v1alpha1", "RunnerList"),
        ]
        assert scheme.recognizes("actions.summerwind.dev/v1alpha1", "Runner")
        assert not scheme.recognizes("v1", "Runner")

    def test_schemes_are_independent(self):
        """Registering on one scheme does not affect another."""
        first = new_scheme()
        second = Scheme()

        assert second.known_kinds() == []
        assert first.known_kinds() != second.known_kinds()

    def test_decode_runner(self):
        """A Runner document decodes to a Runner model."""
        obj = new_scheme().decode(runner_document({"repository": "acme/app"}))

        assert isinstance(obj, Runner)
        assert obj.spec.repository == "acme/app"
        assert obj.metadata.name == "runner-1"

    def test_decode_runner_list(self):
        """A RunnerList document decodes with its items."""
        document = {
            "apiVersion": "actions.summerwind.dev/v1alpha1",
            "kind": "RunnerList",
            "metadata": {"resourceVersion": "42", "continue": "token"},
            "items": [runner_document({"organization": "acme"}, name="a")],
        }

        obj = new_scheme().decode(document)

        assert isinstance(obj, RunnerList)
        assert obj.metadata.continue_ == "token"
        assert obj.items[0].spec.organization == "acme"

    @pytest.mark.parametrize("api_version,kind", [
        ("actions.summerwind.dev/v1alpha1", "RunnerSet"),
        ("actions.summerwind.dev/v1beta1", "Runner"),
        ("", ""),
    ])
    def test_decode_unknown_kind(self, api_version, kind):
        """Unregistered apiVersion/kind pairs are rejected."""
        with pytest.raises(UnknownKindError):
            new_scheme().decode({"apiVersion": api_version, "kind": kind})

    def test_decode_schema_violation(self):
        """Documents that violate field formats raise DecodeError."""
        with pytest.raises(DecodeError, match="Runner"):
            new_scheme().decode(runner_document({"repository": "not-a-repo"}))

    def test_encode_sets_type_fields(self):
        """encode fills apiVersion and kind from the registry."""
        runner = Runner.model_validate(runner_document({"repository": "acme/app"}))

        document = new_scheme().encode(runner)

        assert document["apiVersion"] == "actions.summerwind.dev/v1alpha1"
        assert document["kind"] == "Runner"
        assert document["spec"]["repository"] == "acme/app"

    def test_encode_unregistered(self):
        """Encoding a type absent from the scheme fails."""
        with pytest.raises(UnknownKindError):
            Scheme().encode(Runner())

    def test_register_conflict(self):
        """A kind cannot be re-registered with a different model."""
        scheme = new_scheme()
        scheme.register("Runner", Runner)

        with pytest.raises(ValueError):
            scheme.register("Runner", RunnerList)
