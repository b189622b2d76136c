"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskList, MarkDoneResult)
- errors.py: failure types raised by storage and input parsing
- task_file.py: JSON file adapter (read/write the whole list)
- task_store.py: in-memory session store + load/add/mark-done/save
"""
