"""Core logic for Guidebook: parsing, indexing and formatting guidelines."""
