import logging


class ColorFormatter(logging.Formatter):
    """Custom formatter for colorized console output"""

    def __init__(self, fmt='[%(asctime)s] [%(levelname)s] %(message)s', colors=None, datefmt=None):
        super().__init__(fmt, datefmt)
        self.COLORS = colors or {
            'INFO': '\033[32m',  # Green
            'WARNING': '\033[33m',  # Yellow
            'ERROR': '\033[31m',  # Red
        }
        self.RESET = '\033[0m'

    def format(self, record):
        if not hasattr(record, 'source'):
            record.source = record.name
        log_message = super().format(record)
        level_name = record.levelname
        return f"{self.COLORS.get(level_name, self.RESET)}{log_message}{self.RESET}"
