"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from ramanfit.core.domain.config import RamanFitConfig
from ramanfit.core.shared.exceptions import ConfigError


def load_config(path: Path) -> RamanFitConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        RamanFitConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the file is not valid TOML or the configuration is invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
        return RamanFitConfig.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as exc:
        msg = f"Invalid configuration in {path}: {exc}"
        raise ConfigError(msg) from exc


def save_config(config: RamanFitConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: Configuration object to save.
        path: Path where to save the TOML file.
    """
    data = config.model_dump(mode="json", exclude_none=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a default configuration file as a string.

    Returns:
        str: TOML-formatted default configuration.
    """
    return """# RamanFit Configuration File
# Generated automatically - edit as needed

[noise]
threshold = 2.0  # spectra with signal-to-noise below this are recorded as Noisy

[selection]
r2_limit = 0.6        # Voigt accepted only for R2 < r2_limit
d1_width_limit = 60   # Voigt1 needs floor(D1 HWHM) < d1_width_limit
r1_limit = 0.5        # Voigt3 needs floor(100 R1) < 100 r1_limit
ra2_limit = 2.0       # Lorentzians rejected (Voigt2) when floor(100 RA2) > 100 ra2_limit

[voigt]
tolerance = 1e-8
max_iterations = 500

[lorentzian]
tolerance = 1e-4
max_iterations = 2000

[ledger]
path = "acombinedresults.txt"
match = "substring"  # substring (historical) or exact

[output]
figure_directory = "pdf"
chart_directory = "xy_chart_files"
save_figures = true
save_chart_data = false
# log_file = "ramanfit.log"  # Uncomment to write a log (.json for structured logs)
"""
