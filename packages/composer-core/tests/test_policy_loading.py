"""Tests for composer policy loading from YAML."""

from pathlib import Path

import pytest
from composer_core.data.loader import load_yaml_typed
from composer_core.data.policy import load_composer_policy, load_composer_policy_typed
from composer_core.models.memory import MemoryLimits
from composer_core.models.policy import ComposerPolicy


class TestPolicyLoading:
    @pytest.fixture
    def fixtures_dir(self):
        """Path to policy test fixtures."""
        return Path(__file__).parent / "fixtures" / "policy"

    def test_happy_path_matches_defaults(self, fixtures_dir):
        policy = load_composer_policy_typed(fixtures_dir / "happy.yaml")
        assert policy.memory == MemoryLimits()

    def test_alias_key(self, fixtures_dir):
        policy = load_composer_policy(fixtures_dir / "custom_limits.yaml")
        assert policy.memory.min_mb == 2048
        assert policy.memory.max_mb == 16384
        assert policy.memory.multiple_mb == 2048

    def test_inverted_range_rejected(self, fixtures_dir):
        with pytest.raises(ValueError) as exc_info:
            load_composer_policy(fixtures_dir / "inverted_range.yaml")
        assert "Invalid structure in" in str(exc_info.value)
        assert "inverted_range.yaml" in str(exc_info.value)

    def test_zero_multiple_rejected(self, fixtures_dir):
        with pytest.raises(ValueError):
            load_composer_policy(fixtures_dir / "bad_multiple.yaml")

    def test_empty_file_rejected(self, fixtures_dir):
        with pytest.raises(ValueError, match="Empty YAML file"):
            load_composer_policy(fixtures_dir / "empty.yaml")

    def test_explicit_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_composer_policy(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("memory: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_composer_policy(path)


class TestDefaultPolicyPath:
    def test_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_composer_policy() == ComposerPolicy()

    def test_doctrine_directory_ignored(self, tmp_path, monkeypatch):
        (tmp_path / "doctrine" / "composer-policy.yaml").mkdir(parents=True)
        monkeypatch.chdir(tmp_path)
        assert load_composer_policy() == ComposerPolicy()

    def test_doctrine_file_picked_up(self, tmp_path, monkeypatch):
        doctrine = tmp_path / "doctrine"
        doctrine.mkdir()
        (doctrine / "composer-policy.yaml").write_text(
            "memory:\n  min_mb: 8192\n  max_mb: 65536\n",
            encoding="utf-8",
        )
        monkeypatch.chdir(tmp_path)
        policy = load_composer_policy()
        assert policy.memory.min_mb == 8192
        assert policy.memory.max_mb == 65536
        assert policy.memory.multiple_mb == 1024


class TestTypedLoader:
    def test_requires_exactly_one_target(self, tmp_path):
        path = tmp_path / "policy.yaml"
        path.write_text("memory: {}\n", encoding="utf-8")
        with pytest.raises(ValueError, match="exactly one"):
            load_yaml_typed(path)

    def test_model_target(self, tmp_path):
        path = tmp_path / "policy.yaml"
        path.write_text("memory: {}\n", encoding="utf-8")
        assert load_yaml_typed(path, model=ComposerPolicy) == ComposerPolicy()
