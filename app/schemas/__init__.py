"""Pydantic schemas package.

Folder intent:
  common.py    — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  company.py   — Company request DTOs and CompanyOut
  employee.py  — Employee request DTOs, EmployeeOut, EmployeeParameters
  mapping.py   — ORM entity <-> transfer model mapping
"""
