"""
Storefront API package.

Provides the FastAPI application for the storefront service. The app itself
lives in api.app; uvicorn loads it as "api.app:app".
"""
