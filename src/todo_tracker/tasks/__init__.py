"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskField) and errors
- task_migration.py: normalization of legacy record shapes on load
- task_store.py: JSON-file storage (whole list read/written per call)
- task_api.py: add/list/toggle/done/edit/delete operations over a store
"""
