"""
Middleware package for the UA document utilities API.
"""
from middleware.request_id import RequestIDMiddleware, get_request_id
from middleware.api_key import APIKeyMiddleware

__all__ = ["RequestIDMiddleware", "APIKeyMiddleware", "get_request_id"]
