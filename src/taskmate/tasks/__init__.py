"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskKind)
- task_manager.py: ordered task list with 1-based index operations
- task_store.py: JSON flat-file load/save
"""
