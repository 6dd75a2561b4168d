from dataclasses import dataclass, field
from typing import Dict


@dataclass
class LoggingConfig:
    # Name of the underlying stdlib logger used for console output
    logger_name: str = 'payment_demo'

    # Console output configuration
    console_output: bool = True
    log_format: str = '[%(asctime)s] [%(levelname)s] [%(source)s] %(message)s'
    date_format: str = '%Y-%m-%d %H:%M:%S'
    color_scheme: Dict[str, str] = field(default_factory=lambda: {
        'INFO': '\033[32m',  # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',  # Red
    })
