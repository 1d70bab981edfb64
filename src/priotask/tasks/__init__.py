"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, TaskFormData)
- ordering.py: the canonical order (comparator + stable sort)
- task_store.py: in-memory store; re-sorts after every mutation
- task_api.py: form parsing/validation and console helpers
"""
