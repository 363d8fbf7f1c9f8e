"""
DevConnect backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
the profile/post domain, use cases, and the MongoDB infrastructure.
"""
