"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter, TaskStats)
- task_store.py: in-memory list persisted through a KeyValueStore, plus filtered views
"""
