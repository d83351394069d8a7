# 📄 File: plantcare_social/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Small helpers that run around every web request.
#
# 🧪 Purpose (Technical Summary):
# HTTP middleware exports: request logging with request-id propagation.
#
# 🔗 Dependencies:
# - Starlette BaseHTTPMiddleware
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.main (add_middleware)

from .logging import RequestLoggingMiddleware, get_request_id

__all__ = ["RequestLoggingMiddleware", "get_request_id"]
