"""Data models for rf-pages."""
