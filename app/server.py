"""Process startup: log the database options, bind, report the bound port."""

import logging

import uvicorn

from app.config import Settings, settings as default_settings
from app.main import app

logger = logging.getLogger(__name__)


class Server(uvicorn.Server):
    """uvicorn server that logs the port once its sockets are bound."""

    @property
    def bound_port(self) -> int | None:
        # servers only exists once startup() has run
        servers = getattr(self, "servers", [])
        return next((sock.getsockname()[1] for srv in servers for sock in srv.sockets), None)

    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        # Lifespan failure returns early without binding
        if not self.started:
            return
        logger.info(f"Listening on {self.bound_port}")


def build_server(settings: Settings | None = None) -> Server:
    """Create a server for the app on the configured host and port."""
    if settings is None:
        settings = default_settings
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info",
    )
    return Server(config)


def serve(settings: Settings | None = None):
    """Log the configuration record and run the server until shut down."""
    if settings is None:
        settings = default_settings
    logger.info("Database options:")
    logger.info(settings.database_options())
    build_server(settings).run()
