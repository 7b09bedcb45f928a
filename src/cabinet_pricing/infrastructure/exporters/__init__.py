"""Exporter framework for priced quotes.

Registered exporters:
- csv: Cutlist with one row per priced panel
- json: Full breakdown, weights, fulfilment and schedule

Usage:
    from cabinet_pricing.infrastructure.exporters import ExporterRegistry

    exporter = ExporterRegistry.get("csv")()
    text = exporter.export_string(order_output)
"""

from .base import Exporter, ExporterRegistry, ExportManager
from .cutlist import CutlistCsvExporter
from .json_exporter import (
    SCHEMA_VERSION,
    QuoteJsonExporter,
    breakdown_to_dict,
    fulfilment_to_dict,
    order_to_dict,
    payment_check_to_dict,
    price_list_to_dict,
    price_output_to_dict,
    schedule_to_dict,
    weight_to_dict,
)

__all__ = [
    "CutlistCsvExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "QuoteJsonExporter",
    "SCHEMA_VERSION",
    "breakdown_to_dict",
    "fulfilment_to_dict",
    "order_to_dict",
    "payment_check_to_dict",
    "price_list_to_dict",
    "price_output_to_dict",
    "schedule_to_dict",
    "weight_to_dict",
]
