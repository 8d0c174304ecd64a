"""
Task subsystem.

Components:
- task_models.py: Task entity and the IdGenerator
- task_manager.py: in-memory ordered task list with id-based mutations
- task_repository.py: JSON file and in-memory storage backends
"""
