"""
Recruitment back-end.

Core components:
- api: single entrypoint router and one controller per resource
- models: users, job offers, applications, academic and employment backgrounds
- db: engine/session handling and the partial-update builder
- services: record operations and role authorization
"""
