"""Application entry points for Guidebook."""
