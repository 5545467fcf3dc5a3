"""Batch processing services: directory scan, progress and summary output."""
