from __future__ import annotations

import pytest

from shared.config import DecomposerConfig, LexConfig


def test_defaults():
    config = LexConfig()
    assert config.global_settings.log_level == "WARNING"
    assert config.decomposer.extra_digest_pairs == []
    assert config.decomposer.deduplicate_names is True


def test_load_from_toml_ignores_unknown_keys(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "unknown = 1\n"
        "\n"
        "[decomposer]\n"
        'extra_digest_pairs = [["SHA3256", "SHA3-256"]]\n'
        "deduplicate_names = false\n"
        "\n"
        "[other]\n"
        "x = 2\n",
        encoding="utf-8",
    )
    config = LexConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.decomposer.extra_digest_pairs == [["SHA3256", "SHA3-256"]]
    assert config.decomposer.deduplicate_names is False


def test_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        LexConfig.load(tmp_path / "nope.toml")


def test_digest_pairs_skips_malformed_entries():
    config = DecomposerConfig(
        extra_digest_pairs=[["A1", "A-1"], ["only-one"], ["B", 2], ["C1", "C-1", "x"]],
    )
    assert config.digest_pairs() == [("A1", "A-1")]


def test_to_dict_round_trips_sections():
    data = LexConfig().to_dict()
    assert set(data) == {"global_settings", "decomposer"}
    assert data["decomposer"]["comment_prefix"] == "#"
