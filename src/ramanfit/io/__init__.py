"""I/O module for RamanFit.

Handles file operations including:
- Configuration file loading/saving (TOML)
- The append-only result ledger
- Normalized chart data export
"""

from ramanfit.io.charts import chart_data, write_chart_data
from ramanfit.io.config import generate_default_config, load_config, save_config
from ramanfit.io.ledger import ResultLedger, ledger_key

__all__ = [
    "ResultLedger",
    "chart_data",
    "generate_default_config",
    "ledger_key",
    "load_config",
    "save_config",
    "write_chart_data",
]
