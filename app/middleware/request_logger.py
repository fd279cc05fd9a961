import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Writes one access line per HTTP request: status | latency | ip | method | path"""

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.time()
        response_status = 500

        async def send_with_status(message):
            nonlocal response_status
            if message["type"] == "http.response.start":
                response_status = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_with_status)
        finally:
            latency_ms = (time.time() - start_time) * 1000
            path = scope.get("path", "")
            query = scope.get("query_string", b"").decode("latin-1")
            if query:
                path = f"{path}?{query}"
            client = scope.get("client")
            client_ip = client[0] if client else "-"
            logger.info(f"{response_status} | {latency_ms:.2f}ms | {client_ip} | {scope.get('method', '')} | {path}")
