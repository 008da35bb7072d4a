"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  company.py   — Companies (parent resource)
  employee.py  — Employees, always scoped to one company
  mixins.py    — Shared UUIDMixin, TimestampMixin
"""

from app.domain.company import Company
from app.domain.employee import Employee

__all__ = [
    "Company",
    "Employee",
]
