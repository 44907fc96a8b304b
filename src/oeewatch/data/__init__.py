"""Production record loading."""

from oeewatch.data.records import (
    load_production_records,
    production_record_from_mapping,
    production_records_from_payload,
)

__all__ = [
    "load_production_records",
    "production_record_from_mapping",
    "production_records_from_payload",
]
