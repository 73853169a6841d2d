"""
Configuration for vendor order-line generation.

Config is declarative JSON - edit the file, not the code.
Header candidate groups and catalog column names are fixed contracts with
the operator and live here as module constants.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_CONFIG_PATH = Path(__file__).parent / "order_config.json"

# Source sheet: logical field -> candidate header names, in priority order
SOURCE_HEADER_CANDIDATES = {
    "vendor": ["廠商", "供應商", "製造商", "廠牌"],
    "name": ["商品名", "商品名稱", "品名", "藥品名稱", "藥品名", "名稱", "品項"],
    "spec": ["規格", "含量", "劑量", "規格含量", "包裝", "Strength"],
    "info": ["藥品資訊", "藥品資訊(商品+規格)", "資訊"],
}

# Catalog sheet: exact header names
CATALOG_COLUMNS = {
    "name": "商品",
    "qty": "常見叫藥數量",
    "spec": "規格",
    "vendor": "廠商",
}
CATALOG_REQUIRED = ("name", "qty")

OUTPUT_HEADER = ["廠商", "訂單文字"]


class ConfigurationError(ValueError):
    """Fatal setup problem: missing sheet, missing mandatory column, bad option."""


@dataclass
class SheetNames:
    """Names of the sheets the pipeline reads from and writes to."""
    source: str = "結果"
    catalog: str = "常見量對照"
    output: str = "訂單文字"


@dataclass
class Config:
    """Full configuration for one order-line run."""
    include_spec: bool = False
    default_unit: str = "盒"
    unspecified_vendor: str = "（未指定廠商）"
    collation_locale: str = "zh_Hant_TW"
    sheets: SheetNames = field(default_factory=SheetNames)

    def __post_init__(self):
        if not isinstance(self.include_spec, bool):
            raise ConfigurationError(
                f"include_spec must be true or false, got {self.include_spec!r}"
            )
        for name in ("default_unit", "unspecified_vendor", "collation_locale"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(f"{name} must be a non-empty string")
        for name in ("source", "catalog", "output"):
            if not str(getattr(self.sheets, name) or "").strip():
                raise ConfigurationError(f"sheets.{name} must be a non-empty string")
        if self.sheets.output in (self.sheets.source, self.sheets.catalog):
            raise ConfigurationError(
                f"Output sheet {self.sheets.output} would overwrite an input sheet"
            )


def load_config(config_path: str | Path | None = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to order_config.json (default: the packaged file)

    Returns:
        Config with defaults for any key the file omits
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")

    defaults = SheetNames()
    sheets_data = data.get("sheets")
    if sheets_data is None:
        sheets_data = {}
    if not isinstance(sheets_data, dict):
        raise ConfigurationError(f"sheets in {path} must be a JSON object")
    sheets = SheetNames(
        source=sheets_data.get("source", defaults.source),
        catalog=sheets_data.get("catalog", defaults.catalog),
        output=sheets_data.get("output", defaults.output),
    )

    base = Config()
    return Config(
        include_spec=data.get("include_spec", base.include_spec),
        default_unit=data.get("default_unit", base.default_unit),
        unspecified_vendor=data.get("unspecified_vendor", base.unspecified_vendor),
        collation_locale=data.get("collation_locale", base.collation_locale),
        sheets=sheets,
    )
