"""Worklog CLI - personal work-log tracker."""

__version__ = "0.3.0"
