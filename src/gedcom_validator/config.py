import os
import yaml
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "gedcom_validator.yml"
CONFIG_ENV_VAR = "GEDCOM_VALIDATOR_CONFIG"

DEFAULT_REPORT_FILE = "GedcomService_output.txt"
DEFAULT_MISSING_NAME = "null"


class GVConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.reporting = data.get("reporting", {}) or {}
        self.rules = data.get("rules", {}) or {}
        self.debug = data.get("debug", False)

    @property
    def report_file(self) -> str:
        return self.paths.get("report_file") or DEFAULT_REPORT_FILE

    @property
    def missing_name(self) -> str:
        value = self.reporting.get("missing_name")
        return DEFAULT_MISSING_NAME if value is None else str(value)

    @property
    def enabled_rules(self):
        """Rule codes to run by default; None means the whole catalog."""
        enabled = self.rules.get("enabled")
        return list(enabled) if enabled else None


def load_config(path=None) -> 'GVConfig':
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit) if explicit else CONFIG_PATH

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return GVConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return GVConfig(data)

_config_cache = None

def get_config() -> 'GVConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
