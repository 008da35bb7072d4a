"""Services package — all business logic lives here, never in routers.

Files:
  company.py   — company CRUD and bulk operations
  employee.py  — employee CRUD and the paged employee listing

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
