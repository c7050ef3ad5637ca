"""Service layer for Worklog CLI."""
