"""
Core app - Cross-cutting plumbing for the HTTP surface.

This app provides:
- Health and API-description endpoints
- Origin (CORS) policy and its django-cors-headers wiring
- Request logging and API-wide error responses
- Readiness-gated startup (StartupOrchestrator + `manage.py serve`)
"""
