"""Mock product routes. Data is generated on the fly; nothing is stored."""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from container import Container
from Logger.logger import LoggerService

router = APIRouter(prefix="/product", tags=["product"])

MOCK_PRODUCTS = [
    {"id": 1, "name": "Laptop Dell XPS 15", "price": 35_000_000},
    {"id": 2, "name": "iPhone 15 Pro Max", "price": 30_000_000},
    {"id": 3, "name": "Samsung Galaxy S24", "price": 25_000_000},
]


@router.get("")
@inject
def get_products(logger: LoggerService = Depends(Provide[Container.logger_service])):
    logger.log_info("Fetching product list", "ProductController.get_products")
    logger.log_info(f"Fetched {len(MOCK_PRODUCTS)} products", "ProductController.get_products")
    return {"success": True, "data": MOCK_PRODUCTS, "logger_instance_id": logger.get_instance_id()}


@router.get("/search")
@inject
def search_products(
    keyword: Optional[str] = Query(default=None),
    logger: LoggerService = Depends(Provide[Container.logger_service]),
):
    logger.log_info(f"Searching products with keyword: {keyword}", "ProductController.search_products")

    if not keyword:
        logger.log_warning("Empty search keyword", "ProductController.search_products")
        return JSONResponse(status_code=400, content={"success": False, "message": "Keyword must not be empty"})

    results = [{"id": 1, "name": f"Result for '{keyword}'", "price": 10_000_000}]
    logger.log_info(f"Found {len(results)} products", "ProductController.search_products")
    return {"success": True, "data": results, "logger_instance_id": logger.get_instance_id()}


@router.delete("/{product_id}")
@inject
def delete_product(product_id: int, logger: LoggerService = Depends(Provide[Container.logger_service])):
    logger.log_warning(f"Deleting product with ID: {product_id}", "ProductController.delete_product")

    if product_id <= 0:
        logger.log_error(f"Invalid ID on delete: {product_id}", "ProductController.delete_product")
        return JSONResponse(status_code=400, content={"success": False, "message": "Invalid ID"})

    logger.log_info(f"Product ID {product_id} deleted", "ProductController.delete_product")
    return {
        "success": True,
        "message": f"Deleted product ID {product_id}",
        "logger_instance_id": logger.get_instance_id(),
    }
