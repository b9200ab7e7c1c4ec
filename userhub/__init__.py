"""
userhub root package.

This package contains the FastAPI app entry point (main.py), the GraphQL API,
the user domain and its use cases, and the MongoDB infrastructure.
"""
