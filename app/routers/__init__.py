"""Routers package — HTTP endpoint definitions (mounted under /api).

Files:
  companies.py  — /api/companies/*
  employees.py  — /api/companies/{company_id}/employees/*

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to app/services/.
"""
