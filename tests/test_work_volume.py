"""
Unit tests for the work volume claim template and its derived descriptors.
"""
import pytest

from runnerspec.domain.defaults import RunnerDefaults, resolve_runner_defaults
from runnerspec.domain.entities import RunnerSpec, WorkVolumeClaimTemplate
from runnerspec.shared.domain_exceptions import InvalidWorkVolumeClaimTemplate
from runnerspec.use_cases.derive_work_volume import DeriveWorkVolume


class TestTemplateValidation:
    """Tests for WorkVolumeClaimTemplate.ensure_valid."""

    @pytest.mark.parametrize("modes", [
        ["ReadWriteOnce"],
        ["ReadWriteMany"],
        ["ReadWriteOnce", "ReadWriteMany"],
    ])
    def test_supported_modes(self, modes):
        """Supported access modes pass."""
        assert WorkVolumeClaimTemplate(access_modes=modes).ensure_valid() is None

    @pytest.mark.parametrize("modes", [None, []])
    def test_missing_modes(self, modes):
        """Absent and empty access modes both fail."""
        with pytest.raises(InvalidWorkVolumeClaimTemplate, match="at least one access mode"):
            WorkVolumeClaimTemplate(access_modes=modes).ensure_valid()

    @pytest.mark.parametrize("bad", ["ReadOnlyMany", "ReadWriteOncePod", ""])
    def test_unsupported_mode_identified(self, bad):
        """The first unsupported mode is named in the error."""
        with pytest.raises(InvalidWorkVolumeClaimTemplate) as exc_info:
            WorkVolumeClaimTemplate(access_modes=["ReadWriteOnce", bad]).ensure_valid()

        assert str(exc_info.value) == f"access mode {bad} is not supported"


class TestVolumeDerivation:
    """Tests for to_volume and to_volume_mount."""

    def test_volume_copies_template(self, valid_template):
        """The derived volume is named work and carries the template's claim spec."""
        template = WorkVolumeClaimTemplate.model_validate(valid_template)
        volume = template.to_volume()

        assert volume.name == "work"
        claim_spec = volume.ephemeral.volume_claim_template.spec
        assert claim_spec.access_modes == ["ReadWriteOnce"]
        assert claim_spec.storage_class_name == "standard"
        assert claim_spec.resources.requests == {"storage": "10Gi"}

    def test_volume_document_shape(self, valid_template):
        """The volume serializes to the pod volume document layout."""
        volume = WorkVolumeClaimTemplate.model_validate(valid_template).to_volume()

        assert volume.to_document() == {
            "name": "work",
            "ephemeral": {
                "volumeClaimTemplate": {
                    "spec": {
                        "accessModes": ["ReadWriteOnce"],
                        "storageClassName": "standard",
                        "resources": {"limits": {}, "requests": {"storage": "10Gi"}},
                    }
                }
            },
        }

    def test_volume_independent_of_template(self, valid_template):
        """Changing the template afterwards does not affect the derived volume."""
        template = WorkVolumeClaimTemplate.model_validate(valid_template)
        volume = template.to_volume()

        template.access_modes.append("ReadWriteMany")
        template.resources.requests["storage"] = "1Gi"
        template.storage_class_name = "fast"

        claim_spec = volume.ephemeral.volume_claim_template.spec
        assert claim_spec.access_modes == ["ReadWriteOnce"]
        assert claim_spec.resources.requests == {"storage": "10Gi"}
        assert claim_spec.storage_class_name == "standard"

    def test_volume_mount(self, valid_template):
        """The mount binds the work volume to the given path."""
        mount = WorkVolumeClaimTemplate.model_validate(valid_template).to_volume_mount("/runner/_work")

        assert mount.name == "work"
        assert mount.mount_path == "/runner/_work"
        assert mount.to_document() == {"name": "work", "mountPath": "/runner/_work"}

    def test_invalid_template_fails_loudly(self):
        """Deriving from an invalid template raises instead of producing a descriptor."""
        template = WorkVolumeClaimTemplate(access_modes=["ReadOnlyMany"])

        with pytest.raises(InvalidWorkVolumeClaimTemplate):
            template.to_volume()
        with pytest.raises(InvalidWorkVolumeClaimTemplate):
            template.to_volume_mount("/runner/_work")


class TestDeriveWorkVolume:
    """Tests for the DeriveWorkVolume use case."""

    def test_kubernetes_spec_mounted_at_default_work_dir(self, valid_template):
        """Without workDir the volume is mounted at the default work dir."""
        spec = RunnerSpec.model_validate({
            "repository": "acme/app",
            "containerMode": "kubernetes",
            "workVolumeClaimTemplate": valid_template,
        })

        result = DeriveWorkVolume().execute(spec)

        assert result.volume.name == "work"
        assert result.volume_mount.mount_path == "/runner/_work"

    def test_work_dir_overrides_default(self, valid_template):
        """A spec workDir is used as the mount path."""
        spec = RunnerSpec.model_validate({
            "repository": "acme/app",
            "containerMode": "kubernetes",
            "workDir": "/home/runner/work",
            "workVolumeClaimTemplate": valid_template,
        })

        result = DeriveWorkVolume(RunnerDefaults(work_dir="/ignored")).execute(spec)

        assert result.volume_mount.mount_path == "/home/runner/work"

    def test_docker_mode_has_no_work_volume(self, valid_template):
        """Docker container mode derives nothing."""
        spec = RunnerSpec.model_validate({"repository": "acme/app", "workVolumeClaimTemplate": valid_template})
        assert DeriveWorkVolume().execute(spec) is None


class TestResolveDefaults:
    """Tests for boundary defaulting of optional flags."""

    def test_unset_flags_take_defaults(self):
        """Unset flags resolve to ephemeral, docker enabled, no dockerd in runner."""
        resolved = resolve_runner_defaults(RunnerSpec(repository="acme/app"))

        assert resolved.ephemeral is True
        assert resolved.docker_enabled is True
        assert resolved.dockerd_within_runner_container is False
        assert resolved.work_dir == "/runner/_work"

    def test_explicit_false_is_kept(self):
        """An explicit false is not replaced by a true default."""
        resolved = resolve_runner_defaults(RunnerSpec(ephemeral=False, docker_enabled=False))

        assert resolved.ephemeral is False
        assert resolved.docker_enabled is False
