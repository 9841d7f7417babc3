"""Tests for configuration models and TOML loading."""

import tomllib

import pytest
from pydantic import ValidationError

from ramanfit.core.domain.config import RamanFitConfig, SelectionConfig
from ramanfit.core.shared.exceptions import ConfigError
from ramanfit.io.config import generate_default_config, load_config, save_config


class TestRamanFitConfig:
    """Tests for defaults and validation."""

    def test_defaults(self):
        config = RamanFitConfig()

        assert config.noise.threshold == 2.0
        assert config.selection == SelectionConfig(
            r2_limit=0.6, d1_width_limit=60, r1_limit=0.5, ra2_limit=2.0
        )
        assert (config.voigt.tolerance, config.voigt.max_iterations) == (1e-8, 500)
        assert (config.lorentzian.tolerance, config.lorentzian.max_iterations) == (1e-4, 2000)
        assert config.ledger.match == "substring"
        assert not config.output.save_chart_data

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            RamanFitConfig.model_validate({"noise": {"treshold": 3}})

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError):
            RamanFitConfig.model_validate({"noise": {"threshold": -1}})

    def test_with_threshold(self):
        config = RamanFitConfig().with_threshold(5.0)

        assert config.noise.threshold == 5.0
        assert RamanFitConfig().noise.threshold == 2.0


class TestConfigFiles:
    """Tests for TOML loading and saving."""

    def test_load(self, tmp_path):
        path = tmp_path / "ramanfit.toml"
        path.write_text('[noise]\nthreshold = 5\n\n[ledger]\nmatch = "exact"\n')

        config = load_config(path)

        assert config.noise.threshold == 5.0
        assert config.ledger.match == "exact"
        assert config.voigt.max_iterations == 500

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[noise\nthreshold = ")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text('[ledger]\nmatch = "fuzzy"\n')

        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "saved.toml"
        config = RamanFitConfig().with_threshold(3.5)

        save_config(config, path)

        assert load_config(path) == config

    def test_default_template_matches_defaults(self):
        data = tomllib.loads(generate_default_config())

        assert RamanFitConfig.model_validate(data) == RamanFitConfig()
