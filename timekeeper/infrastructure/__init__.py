"""
Infrastructure layer for the Timekeeper time tracking backend.

This layer contains the implementation details behind the domain interfaces:
- Database (SQLAlchemy models, mappers and repositories)
- Authentication (bearer JWTs)
- Report exports (CSV, XLSX and PDF)
- Web API (FastAPI routers, dependencies and error handling)
"""
