"""
Core Base Module

Shared building blocks for every magang app.

Exports:
    - LifecycleStatus: ACTIVE/DELETED lifecycle tag
    - TimestampMixin: created_at, updated_at
    - SoftDeleteMixin: lifecycle + deleted_at with soft_delete()/restore()

Managers live in core.base.managers, the error taxonomy in
core.base.exceptions.
"""
