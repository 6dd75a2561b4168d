# main.py
"""
Payment Demo Main Module
This is the entry point for the Singleton & Factory Method demo API
"""

import os
import sys
import traceback

import uvicorn

from Api.main import create_app
from Config.app_config import ConfigManager
from container import Container
from Logger.logger import LoggerService


CONFIG_PATH = os.environ.get("PAYMENT_DEMO_CONFIG", "Config/app_config.json")


class PaymentDemoApp:
    """Main application: loads configuration, builds the container and serves HTTP"""

    def __init__(self, config_path: str = CONFIG_PATH):
        # Load configuration first
        self.config_manager = ConfigManager()

        if os.path.exists(config_path):
            print(f"Loading configuration from {config_path}")
            self.config_manager.load_from_file(config_path)
            print("Configuration loaded successfully")
        else:
            print(f"Config file not found: {config_path}")
            print("Using default configuration")
            self.config_manager.load_from_dict(self.config_manager.generate_default_config())

        self.container = Container()
        self.container.config.from_dict(self.config_manager.to_dict())

        self.app = create_app(self.container)
        self._logger: LoggerService = self.container.logger_service()

    def run(self) -> None:
        """Serve the API until interrupted"""
        server = self.config_manager.config.server
        self._logger.log_info(f"API running on: http://{server.host}:{server.port}", "Program")
        uvicorn.run(self.app, host=server.host, port=server.port)


def main() -> int:
    try:
        PaymentDemoApp().run()
        return 0
    except Exception as e:
        LoggerService.instance().log_error(
            f"Fatal error: {type(e).__name__}: {e}\n{traceback.format_exc()}",
            "Program"
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
