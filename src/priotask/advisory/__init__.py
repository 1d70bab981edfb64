"""
Advisory subsystem.

- prompt.py: renders the active-task snapshot for the model
- service.py: request lifecycle (loading flag, last-write-wins text, errors)
"""
