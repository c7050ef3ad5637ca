"""SQLite storage for the local work-log database."""
