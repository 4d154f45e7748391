"""
Tracker subsystem.

Components:
- models.py: data structures (Task, Project, TaskStatus)
- errors.py: failure kinds raised to callers
- store.py: in-memory ProjectStore + add_task + seed data
- queries.py: summary / sort / filter / remaining-time / critical-task helpers
- service.py: simulated async loading and status updates (injected delay)
- api.py: small high-level helpers used by the demo flow
"""
