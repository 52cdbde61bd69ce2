"""Tests for recov.config module.

Covers:
- BackendCredential holder
- AssistantConfig settings and environment variable support
- Configuration load/save to YAML
"""

from __future__ import annotations

from pathlib import Path

import pytest

from recov.config import AssistantConfig, BackendCredential


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep RECOV_* variables from the host out of the tests."""
    for name in (
        "RECOV_API_KEY",
        "RECOV_LOW_CONFIDENCE_THRESHOLD",
        "RECOV_MAX_INPUT_LENGTH",
        "RECOV_PROJECT_PATH",
    ):
        monkeypatch.delenv(name, raising=False)


# ============================================================================
# BackendCredential Tests
# ============================================================================


class TestBackendCredential:
    """Tests for the shared API key holder."""

    def test_empty_by_default(self):
        credential = BackendCredential()
        assert credential.api_key is None
        assert credential.is_set is False

    def test_update(self):
        credential = BackendCredential()
        credential.update("sk-test")
        assert credential.api_key == "sk-test"
        assert credential.is_set is True

    def test_empty_string_clears(self):
        credential = BackendCredential("sk-test")
        credential.update("")
        assert credential.is_set is False

    def test_repr_hides_key(self):
        credential = BackendCredential("sk-secret")
        assert "sk-secret" not in repr(credential)
        assert "set" in repr(credential)

    def test_holder_state_is_plain_key(self):
        """Test the holder keeps nothing but the key."""
        credential = BackendCredential("sk-test")
        assert vars(credential) == {"_api_key": "sk-test"}

    def test_update_seen_through_every_reference(self):
        credential = BackendCredential()
        backend_view = credential
        credential.update("sk-new")
        assert backend_view.api_key == "sk-new"
        credential.update(None)
        assert backend_view.is_set is False


# ============================================================================
# AssistantConfig Tests
# ============================================================================


class TestAssistantConfig:
    """Tests for AssistantConfig settings."""

    def test_defaults(self):
        """AssistantConfig has sensible defaults."""
        config = AssistantConfig()
        assert config.api_key is None
        assert config.low_confidence_threshold == 80
        assert config.max_input_length == 10_000
        assert config.project_path == Path.cwd()

    def test_api_key_from_env(self, monkeypatch):
        """RECOV_API_KEY configures the credential."""
        monkeypatch.setenv("RECOV_API_KEY", "sk-env")
        config = AssistantConfig()
        assert config.api_key is not None
        assert config.api_key.get_secret_value() == "sk-env"
        assert config.credential().api_key == "sk-env"

    def test_api_key_masked(self):
        config = AssistantConfig(api_key="sk-secret")
        assert "sk-secret" not in repr(config)

    def test_threshold_from_env(self, monkeypatch):
        monkeypatch.setenv("RECOV_LOW_CONFIDENCE_THRESHOLD", "70")
        assert AssistantConfig().low_confidence_threshold == 70

    def test_threshold_validated(self):
        with pytest.raises(ValueError):
            AssistantConfig(low_confidence_threshold=150)

    def test_credential_is_shared(self):
        """credential() returns the same object every time."""
        config = AssistantConfig()
        assert config.credential() is config.credential()
        assert config.credential().is_set is False

    def test_config_file_path(self, tmp_path):
        config = AssistantConfig(project_path=tmp_path)
        assert config.config_file == tmp_path / ".recov" / "config.yaml"


# ============================================================================
# Load / Save Tests
# ============================================================================


class TestConfigPersistence:
    """Tests for YAML load and save."""

    def test_load_without_file(self, tmp_path):
        config = AssistantConfig.load(tmp_path)
        assert config.project_path == tmp_path
        assert config.low_confidence_threshold == 80

    def test_save_creates_config_file(self, tmp_path):
        config = AssistantConfig(project_path=tmp_path, low_confidence_threshold=60)
        config.save()
        assert (tmp_path / ".recov" / "config.yaml").exists()

    def test_save_omits_api_key(self, tmp_path):
        config = AssistantConfig(project_path=tmp_path, api_key="sk-secret")
        config.save()
        assert "sk-secret" not in (tmp_path / ".recov" / "config.yaml").read_text()

    def test_load_reads_saved_config(self, tmp_path):
        AssistantConfig(
            project_path=tmp_path,
            low_confidence_threshold=60,
            max_input_length=500,
        ).save()

        config = AssistantConfig.load(tmp_path)
        assert config.low_confidence_threshold == 60
        assert config.max_input_length == 500

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        AssistantConfig(project_path=tmp_path, low_confidence_threshold=60).save()
        monkeypatch.setenv("RECOV_LOW_CONFIDENCE_THRESHOLD", "70")

        config = AssistantConfig.load(tmp_path)
        assert config.low_confidence_threshold == 70

    def test_load_ignores_unknown_keys(self, tmp_path):
        config_dir = tmp_path / ".recov"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text(
            "assistant:\n  low_confidence_threshold: 65\n  theme: dark\n"
        )

        config = AssistantConfig.load(tmp_path)
        assert config.low_confidence_threshold == 65

    def test_load_empty_file(self, tmp_path):
        config_dir = tmp_path / ".recov"
        config_dir.mkdir()
        (config_dir / "config.yaml").write_text("")

        config = AssistantConfig.load(tmp_path)
        assert config.low_confidence_threshold == 80
