"""FastAPI application factory.

Builds the HTTP surface around the payment factory and the singleton logger:
- `/api/payment/*` payment processing via the Factory Method
- `/api/log/*` inspection of the shared log sink
- `/api/user/*` and `/api/product/*` mocked data
- `/health`
"""

from datetime import datetime
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, FastAPI

from Config.app_config import ConfigManager
from container import Container
from Logger.logger import LoggerService

from .routes.api_router import router

WIRED_MODULES = [
    "Api.main",
    "Api.routes.payments",
    "Api.routes.logs",
    "Api.routes.users",
    "Api.routes.products",
]


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Create the application, wiring routes to `container`.

    A container without loaded configuration gets the default configuration.
    """
    container = container or Container()
    if not container.config():
        config_manager = ConfigManager()
        config_manager.load_from_dict(config_manager.generate_default_config())
        container.config.from_dict(config_manager.to_dict())

    # Route modules resolve Provide[...] markers against this container
    container.wire(modules=WIRED_MODULES)

    logger = container.logger_service()
    logger.load_config(container.logging_config())

    server_config = container.server_config()
    app = FastAPI(title=server_config.title, version=server_config.version)
    app.container = container
    app.include_router(router)
    app.add_api_route("/health", health, methods=["GET"], tags=["health"])

    logger.log_info("===== APPLICATION STARTING =====", "Program")
    logger.log_info(f"Logger Instance ID: {logger.get_instance_id()}", "Program")

    return app


@inject
def health(logger: LoggerService = Depends(Provide[Container.logger_service])):
    """Health check endpoint.

    Returns:
        dict: status, current timestamp and the shared logger's instance id.
    """
    logger.log_info("Health check called", "HealthCheck")
    return {
        "status": "Healthy",
        "timestamp": datetime.now().isoformat(),
        "logger_instance_id": logger.get_instance_id(),
    }
