"""
FastAPI Web Server for the Promtail logging demo
Serves a static greeting on `/` and emits a heartbeat log line on a fixed timer
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
import uvicorn

from src.heartbeat.heartbeat_emitter import HeartbeatEmitter
from src.utils.config_manager import config
from src.utils.logger import get_logger


GREETING = "🚀 Sample Node App for Promtail Logging Demo!"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000


class DemoServer(uvicorn.Server):
    """uvicorn server announcing itself once the listening socket is bound"""

    async def startup(self, sockets=None) -> None:
        # Bind failures exit inside super().startup(), before the announcement
        await super().startup(sockets=sockets)
        if self.started:
            print(f"Server running on port {self.bound_port}", flush=True)

    @property
    def bound_port(self) -> int:
        """Actual listening port (resolves port 0)"""
        for server in getattr(self, 'servers', []):
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.config.port


class PromtailDemoApp:
    """Demo web application producing log output for a log collector"""

    def __init__(self, host: Optional[str] = None, port: Optional[int] = None,
                 heartbeat_interval_ms: Optional[int] = None):
        server_config = config.get_server_config()
        self.host = host if host is not None else server_config.get('host', DEFAULT_HOST)
        self.port = int(port if port is not None else server_config.get('port', DEFAULT_PORT))

        self.logger = get_logger('promtail_demo')
        self.heartbeat = HeartbeatEmitter(heartbeat_interval_ms)

        self.app = FastAPI(
            title="Promtail Logging Demo",
            description="Sample app emitting request and heartbeat logs",
            version="1.0.0",
            lifespan=self._lifespan
        )

        # Setup routes
        self._setup_routes()

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        await self.heartbeat.start()
        try:
            yield
        finally:
            await self.heartbeat.stop()

    def _setup_routes(self):
        """Setup HTTP routes"""

        @self.app.get("/", response_class=PlainTextResponse)
        async def read_root():
            self.logger.info("GET / request received")
            return GREETING

    def build_server(self, log_level: str = "info", http: str = "httptools") -> DemoServer:
        """Create the uvicorn server for this app without starting it"""
        return DemoServer(uvicorn.Config(
            self.app,
            host=self.host,
            port=self.port,
            log_level=log_level,
            # One log line per request comes from the route itself
            access_log=False,
            workers=1,
            loop="asyncio",
            http=http
        ))

    def run(self):
        """Run the web server"""
        self.build_server().run()


def main():
    """Main entry point"""
    app = PromtailDemoApp()
    app.run()


if __name__ == "__main__":
    main()
