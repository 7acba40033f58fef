"""Rate limiter instance for SlowAPI.

Shared so both create_app (app.state.limiter) and route modules use the same
instance. Limit strings come from settings and are resolved per request, so
tests can change them via environment and get_settings.cache_clear().

Requests are keyed by the connection's remote address. Behind a proxy, run
uvicorn with --proxy-headers and --forwarded-allow-ips so the address is the
client's; X-Forwarded-For is never trusted here.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from community_search.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)

limit_search = limiter.limit(lambda: get_settings().search_rate_limit)
limit_suggestions = limiter.limit(lambda: get_settings().suggestion_rate_limit)
limit_analytics = limiter.limit(lambda: get_settings().analytics_rate_limit)
