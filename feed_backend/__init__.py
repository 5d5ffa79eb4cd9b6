"""
Feed Backend Application root package.

This package contains the FastAPI app entry point (main.py), API routes,
the auth and post domain (use cases, models, repository contracts) and the
infrastructure (MongoDB, asset storage, realtime notifications).
"""
