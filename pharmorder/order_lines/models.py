"""
Data models for vendor order-line generation.

All structured data uses frozen dataclasses: records are built once by the
readers and never mutated afterwards.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceRow:
    """
    One record from the flagged/grouped source sheet.

    raw_text joins the normalized name, spec and info cells of the record.
    vendor may be empty (the "no vendor specified" bucket).
    """
    vendor: str
    raw_text: str


@dataclass(frozen=True)
class CatalogEntry:
    """
    One row of the typical-quantity lookup table.

    The *_key fields are lowercase comparison copies, never displayed.
    """
    name: str
    name_key: str
    qty: str
    spec: str = ""
    spec_key: str = ""
    vendor: str = ""
    vendor_key: str = ""

    @classmethod
    def build(cls, name: str, qty: str, spec: str = "", vendor: str = "") -> "CatalogEntry":
        """Create an entry with comparison keys derived from the display values."""
        return cls(
            name=name,
            name_key=name.lower(),
            qty=qty,
            spec=spec,
            spec_key=spec.lower(),
            vendor=vendor,
            vendor_key=vendor.lower(),
        )

    @property
    def vendor_agnostic(self) -> bool:
        return not self.vendor_key


@dataclass(frozen=True)
class OrderLine:
    """Final per-vendor sentence, e.g. 美時想訂Cimidona 30盒、Mesyrel 10盒."""
    vendor: str
    text: str

    def as_row(self) -> list[str]:
        return [self.vendor, self.text]


# vendor key (possibly "") -> normalized, lowercased haystack text
VendorBlob = dict[str, str]


@dataclass
class MatchSummary:
    """Counters collected while composing order lines."""
    vendors: int = 0
    matched_vendors: int = 0
    fragments: int = 0
    dropped_no_qty: int = 0
    skipped_catalog_rows: int = 0
    unmatched_vendors: list[str] = field(default_factory=list)
