# Config/app_config.py
from dataclasses import dataclass, field
from typing import Dict, Any
import json
import os

from Config.logging_config import LoggingConfig


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 5000
    title: str = "Singleton & Factory Pattern Demo API"
    version: str = "1.0.0"


@dataclass
class PaymentConfig:
    # Simulated gateway latency in seconds, keyed by canonical payment type
    processing_delays: Dict[str, float] = field(default_factory=lambda: {
        "CASH": 0.5,
        "PAYPAL": 1.5,
        "VNPAY": 1.2,
    })


@dataclass
class AppConfig:
    server: ServerConfig
    payments: PaymentConfig
    logging: LoggingConfig


class ConfigManager:
    """Loads application configuration from JSON files or dictionaries"""

    def __init__(self):
        self._config = None

    def load_from_file(self, file_path: str) -> None:
        """Load configuration from JSON file"""
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)

        self.load_from_dict(config_data)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> None:
        """Load configuration from dictionary"""
        server_data = config_dict.get("server", {})
        payments_data = config_dict.get("payments", {})
        logging_data = config_dict.get("logging", {})

        server = ServerConfig(**server_data)

        payments = PaymentConfig()
        for payment_type, delay in payments_data.get("processing_delays", {}).items():
            payments.processing_delays[payment_type.upper()] = float(delay)

        logging_config = LoggingConfig()
        for key in ("logger_name", "console_output", "log_format", "date_format"):
            if key in logging_data:
                setattr(logging_config, key, logging_data[key])
        if "color_scheme" in logging_data:
            logging_config.color_scheme.update(logging_data["color_scheme"])

        self._config = AppConfig(server=server, payments=payments, logging=logging_config)

    def generate_default_config(self) -> Dict[str, Any]:
        """Generate a default configuration dictionary"""
        return {
            "server": {
                "host": "127.0.0.1",
                "port": 5000,
                "title": "Singleton & Factory Pattern Demo API",
                "version": "1.0.0"
            },
            "payments": {
                "processing_delays": {
                    "CASH": 0.5,
                    "PAYPAL": 1.5,
                    "VNPAY": 1.2
                }
            },
            "logging": {
                "console_output": True
            }
        }

    def save_default_config(self, file_path: str) -> None:
        """Save default configuration to a file"""
        config = self.generate_default_config()
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(config, f, indent=4)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the loaded configuration for providers.Configuration"""
        config = self.config
        return {
            "server": {
                "host": config.server.host,
                "port": config.server.port,
                "title": config.server.title,
                "version": config.server.version,
            },
            "payments": {
                "processing_delays": dict(config.payments.processing_delays),
            },
            "logging": {
                "logger_name": config.logging.logger_name,
                "console_output": config.logging.console_output,
                "log_format": config.logging.log_format,
                "date_format": config.logging.date_format,
                "color_scheme": dict(config.logging.color_scheme),
            },
        }

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            raise ValueError("Configuration not loaded")
        return self._config
