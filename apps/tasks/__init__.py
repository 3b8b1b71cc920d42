"""
Tasks app - the task board resource.

Provides:
- Task model and choices
- TaskStoreInterface with ORM and in-memory backends
- /api/tasks router
"""
