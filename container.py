# container.py
from dependency_injector import containers, providers

from Config.app_config import PaymentConfig, ServerConfig
from Config.logging_config import LoggingConfig
from Logger.logger import LoggerService
from Payments.payment_factory import PaymentFactory


class Container(containers.DeclarativeContainer):
    """Application container"""

    config = providers.Configuration()

    # Server configuration
    server_config = providers.Factory(
        ServerConfig,
        host=config.server.host,
        port=config.server.port,
        title=config.server.title,
        version=config.server.version
    )

    # Load logging configuration
    logging_config = providers.Factory(
        LoggingConfig,
        logger_name=config.logging.logger_name,
        console_output=config.logging.console_output,
        log_format=config.logging.log_format,
        date_format=config.logging.date_format,
        color_scheme=config.logging.color_scheme
    )

    payment_config = providers.Factory(
        PaymentConfig,
        processing_delays=config.payments.processing_delays
    )

    # Process-wide logger, the class itself guarantees a single instance
    logger_service = providers.Singleton(
        LoggerService.instance
    )

    # One factory per application so creation statistics are process-wide
    payment_factory = providers.Singleton(
        PaymentFactory,
        logger=logger_service,
        processing_delays=payment_config.provided.processing_delays
    )
