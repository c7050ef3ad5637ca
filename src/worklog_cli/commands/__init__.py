"""Command groups of the worklog CLI."""
