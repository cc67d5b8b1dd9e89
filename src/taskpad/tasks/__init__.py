"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskStats)
- task_store.py: the task collection, its persistence and queries
"""
