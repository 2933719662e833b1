"""
Domain layer containing core business logic and domain services.

Submodules:
- auth: Admin and family authentication (passwords, tokens).
- live: Live streaming domain logic (streams, network gate).
- parish: Parish records (donors, offerings, notices, dashboard, generic resources).
- uploads: Local file store for uploaded images and documents.
- utils: Domain-specific utilities (e.g., ID generation).
"""
