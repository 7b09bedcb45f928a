"""Infrastructure layer - rate sources, formatters and exporters."""

from .catalog import InMemoryRateRepository, JsonRateRepository

# Exporter framework from exporters/ package
from .exporters import (
    CutlistCsvExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    QuoteJsonExporter,
)

# Text formatters
from .formatters import (
    FulfilmentFormatter,
    OrderFormatter,
    PriceBreakdownFormatter,
    PriceListFormatter,
    ScheduleFormatter,
    WeightFormatter,
)

__all__ = [
    # Rate sources
    "InMemoryRateRepository",
    "JsonRateRepository",
    # Exporters
    "CutlistCsvExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "QuoteJsonExporter",
    # Formatters
    "FulfilmentFormatter",
    "OrderFormatter",
    "PriceBreakdownFormatter",
    "PriceListFormatter",
    "ScheduleFormatter",
    "WeightFormatter",
]
