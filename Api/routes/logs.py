"""Log inspection routes.

Every handler reads from the same process-wide LoggerService, so the
`logger_instance_id` in each response is identical for the life of the
process.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from container import Container
from Logger.logger import LoggerService

router = APIRouter(prefix="/log", tags=["log"])


@router.get("")
@inject
def get_all_logs(logger: LoggerService = Depends(Provide[Container.logger_service])):
    logger.log_info("Fetching all logs", "LogController.get_all_logs")
    logs = logger.get_all_logs()
    return {
        "success": True,
        "total_logs": len(logs),
        "data": [entry.to_dict() for entry in logs],
        "logger_instance_id": logger.get_instance_id(),
        "message": "All logs from the same singleton instance",
    }


@router.get("/level/{level}")
@inject
def get_logs_by_level(level: str, logger: LoggerService = Depends(Provide[Container.logger_service])):
    logger.log_info(f"Fetching logs with level: {level}", "LogController.get_logs_by_level")
    logs = logger.get_logs_by_level(level)
    return {
        "success": True,
        "level": level,
        "total_logs": len(logs),
        "data": [entry.to_dict() for entry in logs],
        "logger_instance_id": logger.get_instance_id(),
    }


@router.get("/stats")
@inject
def get_log_stats(logger: LoggerService = Depends(Provide[Container.logger_service])):
    logger.log_info("Fetching log statistics", "LogController.get_log_stats")
    stats = logger.get_statistics()
    return {
        "success": True,
        "data": {
            "total_logs": stats["total"],
            "info_logs": stats["INFO"],
            "warning_logs": stats["WARNING"],
            "error_logs": stats["ERROR"],
            "logger_instance_id": stats["instance_id"],
        },
        "message": "Statistics from the singleton logger instance",
    }


@router.delete("")
@inject
def clear_logs(logger: LoggerService = Depends(Provide[Container.logger_service])):
    logger.log_warning("Clearing all logs", "LogController.clear_logs")
    count_before_clear = logger.get_log_count()
    logger.clear_logs()
    return {
        "success": True,
        "message": f"Cleared {count_before_clear} logs",
        "logger_instance_id": logger.get_instance_id(),
    }


@router.get("/verify-singleton")
@inject
def verify_singleton(logger: LoggerService = Depends(Provide[Container.logger_service])):
    """Compare repeated `LoggerService.instance()` calls with the injected logger."""
    instances = [LoggerService.instance() for _ in range(3)]
    ids = [instance.get_instance_id() for instance in instances]
    is_singleton = len(set(ids)) == 1 and ids[0] == logger.get_instance_id()

    logger.log_info(f"Singleton check: {is_singleton}", "LogController.verify_singleton")

    return {
        "success": True,
        "is_singleton": is_singleton,
        "instance1_id": ids[0],
        "instance2_id": ids[1],
        "instance3_id": ids[2],
        "current_instance_id": logger.get_instance_id(),
        "message": (
            "All calls point to the same instance - singleton works"
            if is_singleton else
            "Instances differ - singleton is broken"
        ),
    }
