"""
Process-wide slowapi limiter.

Routes decorate themselves with `limiter.limit(...)`; the application registers
the limiter on `app.state` and installs the RateLimitExceeded handler.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)
