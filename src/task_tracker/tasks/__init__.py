"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskUpdate, TaskPriority, TaskStatus) + record codec
- task_store.py: ordered in-memory store mirrored into a key-value sink
- task_api.py: small high-level helpers used by the interactive layer
"""
