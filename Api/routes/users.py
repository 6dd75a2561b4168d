"""Mock user routes. Data is generated on the fly; nothing is stored."""

import random

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from container import Container
from Logger.logger import LoggerService

from ..schemas import CreateUserBody

router = APIRouter(prefix="/user", tags=["user"])

MOCK_USERS = [
    {"id": 1, "name": "Nguyen Van A", "email": "nva@example.com"},
    {"id": 2, "name": "Tran Thi B", "email": "ttb@example.com"},
    {"id": 3, "name": "Le Van C", "email": "lvc@example.com"},
]

# Ids above this are reported as missing
MAX_USER_ID = 10


@router.get("")
@inject
def get_users(logger: LoggerService = Depends(Provide[Container.logger_service])):
    logger.log_info("Fetching user list", "UserController.get_users")
    logger.log_info(f"Fetched {len(MOCK_USERS)} users", "UserController.get_users")
    return {"success": True, "data": MOCK_USERS, "logger_instance_id": logger.get_instance_id()}


@router.get("/{user_id}")
@inject
def get_user_by_id(user_id: int, logger: LoggerService = Depends(Provide[Container.logger_service])):
    logger.log_info(f"Looking up user with ID: {user_id}", "UserController.get_user_by_id")

    if user_id <= 0:
        logger.log_warning(f"Invalid ID: {user_id}", "UserController.get_user_by_id")
        return JSONResponse(status_code=400, content={"success": False, "message": "ID must be greater than 0"})

    if user_id > MAX_USER_ID:
        logger.log_error(f"User not found with ID: {user_id}", "UserController.get_user_by_id")
        return JSONResponse(status_code=404, content={"success": False, "message": "User does not exist"})

    user = {"id": user_id, "name": f"User {user_id}", "email": f"user{user_id}@example.com"}
    logger.log_info(f"Found user: {user['name']}", "UserController.get_user_by_id")
    return {"success": True, "data": user, "logger_instance_id": logger.get_instance_id()}


@router.post("", status_code=201)
@inject
def create_user(body: CreateUserBody, logger: LoggerService = Depends(Provide[Container.logger_service])):
    logger.log_info(f"Creating user: {body.name}", "UserController.create_user")

    if not body.name:
        logger.log_error("User name must not be empty", "UserController.create_user")
        return JSONResponse(status_code=400, content={"success": False, "message": "Name must not be empty"})

    new_user = {"id": random.randint(100, 999), "name": body.name, "email": body.email}
    logger.log_info(f"User created with ID: {new_user['id']}", "UserController.create_user")
    return {"success": True, "data": new_user, "logger_instance_id": logger.get_instance_id()}
