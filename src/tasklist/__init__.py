"""
tasklist: a persistent to-do list.

Subpackages:
- tasks: data structures (Task, TaskFilter) and the TaskListStore
- storage: key-value backends the store persists through
- server: minimal HTTP page servers
- connectors / cli: console front-end and entrypoint
"""

__version__ = "0.1.0"
