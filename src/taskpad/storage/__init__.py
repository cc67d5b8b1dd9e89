"""Key-value storage backends (memory, JSON file, SQLite)."""
