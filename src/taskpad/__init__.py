"""taskpad: a local task list manager with pluggable key-value storage."""

__version__ = "0.1.0"
