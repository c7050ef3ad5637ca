"""
Exit codes for Worklog CLI.

Semantic exit codes so that scripts wrapping the CLI can tell a mistyped
date apart from a missing project.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error (bad date, duration, weekday...)
ERROR_INVALID_ARGS = 2

# Configuration file could not be read or written
ERROR_CONFIG = 3

# Local database could not be opened or migrated
ERROR_STORAGE = 4

# Resource not found
ERROR_NOT_FOUND = 5

# Operation cancelled by the user at a prompt
ERROR_CANCELLED = 6

# Resource already exists
ERROR_CONFLICT = 7


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_CONFIG: "ERROR_CONFIG",
        ERROR_STORAGE: "ERROR_STORAGE",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_CANCELLED: "ERROR_CANCELLED",
        ERROR_CONFLICT: "ERROR_CONFLICT",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_CONFIG: "Configuration error - check 'worklog config view'",
        ERROR_STORAGE: "Database error - check 'worklog config data-path'",
        ERROR_NOT_FOUND: "Resource not found",
        ERROR_CANCELLED: "Operation cancelled",
        ERROR_CONFLICT: "Resource already exists",
    }
    return descriptions.get(code, "Unknown error")
