"""Monochrome Indexer - media discovery and metadata extraction for the Monochrome player."""

__version__ = "0.3.0"
