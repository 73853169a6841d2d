"""
Tests for models and config.

Run with: pytest pharmorder/order_lines/tests/test_models_config.py -v
"""

import dataclasses
import json

import pytest

from pharmorder.order_lines.models import CatalogEntry, OrderLine, SourceRow, MatchSummary
from pharmorder.order_lines.config import (
    Config,
    ConfigurationError,
    DEFAULT_CONFIG_PATH,
    SheetNames,
    load_config,
)


class TestCatalogEntry:
    """Test CatalogEntry dataclass."""

    def test_build_derives_keys(self):
        entry = CatalogEntry.build(name="Mesyrel", qty="10盒", spec="50MG", vendor="Abc藥廠")
        assert entry.name_key == "mesyrel"
        assert entry.spec_key == "50mg"
        assert entry.vendor_key == "abc藥廠"
        # Display values keep their case
        assert entry.name == "Mesyrel"
        assert entry.vendor == "Abc藥廠"

    def test_defaults(self):
        entry = CatalogEntry.build(name="Cimidona", qty="30")
        assert entry.spec == ""
        assert entry.vendor == ""
        assert entry.vendor_agnostic

    def test_vendor_scoped(self):
        entry = CatalogEntry.build(name="Cimidona", qty="30", vendor="美時")
        assert not entry.vendor_agnostic

    def test_immutable(self):
        entry = CatalogEntry.build(name="Cimidona", qty="30")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.qty = "40"


class TestRecords:
    """Test SourceRow and OrderLine."""

    def test_source_row_equality(self):
        assert SourceRow("美時", "mesyrel") == SourceRow("美時", "mesyrel")

    def test_order_line_as_row(self):
        line = OrderLine(vendor="美時", text="美時想訂Mesyrel 10盒")
        assert line.as_row() == ["美時", "美時想訂Mesyrel 10盒"]

    def test_summary_defaults(self):
        summary = MatchSummary()
        assert summary.vendors == 0
        assert summary.unmatched_vendors == []


class TestConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        config = Config()
        assert config.include_spec is False
        assert config.default_unit == "盒"
        assert config.unspecified_vendor == "（未指定廠商）"
        assert config.sheets.source == "結果"
        assert config.sheets.catalog == "常見量對照"
        assert config.sheets.output == "訂單文字"

    def test_include_spec_must_be_bool(self):
        with pytest.raises(ConfigurationError):
            Config(include_spec="yes")

    def test_default_unit_required(self):
        with pytest.raises(ConfigurationError):
            Config(default_unit=" ")

    def test_output_cannot_overwrite_input(self):
        with pytest.raises(ConfigurationError):
            Config(sheets=SheetNames(output="結果"))

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestLoadConfig:
    """Test JSON config loading."""

    def test_packaged_config(self):
        config = load_config(DEFAULT_CONFIG_PATH)
        assert config == Config()

    def test_default_path(self):
        assert load_config() == Config()

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"include_spec": True, "sheets": {"output": "叫貨"}}, ensure_ascii=False),
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.include_spec is True
        assert config.default_unit == "盒"
        assert config.sheets.output == "叫貨"
        assert config.sheets.source == "結果"

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"default_unit": ""}), encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_null_sheets_uses_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"sheets": None}), encoding="utf-8")
        assert load_config(path).sheets == SheetNames()

    @pytest.mark.parametrize("sheets", [[], ["結果"], "結果", 3])
    def test_sheets_must_be_object(self, tmp_path, sheets):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"sheets": sheets}, ensure_ascii=False), encoding="utf-8")
        with pytest.raises(ConfigurationError, match="sheets"):
            load_config(path)

    def test_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")
