"""Application package for the pronunciation learning backend.

This package exposes the router, service, repository and model modules
used by the FastAPI application. Individual modules contain the concrete
implementations and documentation.
"""
