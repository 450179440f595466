"""
Request boundary for the game picker.

This package provides:
- The FastAPI application factory (HTTP endpoint)
- The AWS Lambda handler (see lambda_handler)
- A uvicorn launcher (see server)
"""

from .app import PickRequest, create_app, register_routes

__all__ = [
    "PickRequest",
    "create_app",
    "register_routes",
]
