"""Export use cases."""
from .exporter import CsvExporter, Exporter, export_with

__all__ = ["CsvExporter", "Exporter", "export_with"]
