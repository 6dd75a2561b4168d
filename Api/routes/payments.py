"""Payment API routes.

Responsibilities:
- processing payments through the factory-selected payment method
- listing supported methods and estimating fees
- exposing the factory's creation statistics

Handlers are plain `def` functions so FastAPI runs them in its thread pool;
the simulated gateway latency of one request never blocks another.
"""

import traceback
from decimal import Decimal
from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from container import Container
from Logger.logger import LoggerService
from Payments.exceptions import UnsupportedPaymentTypeError
from Payments.payment_factory import PaymentFactory

from ..schemas import PaymentRequestBody

router = APIRouter(prefix="/payment", tags=["payment"])

SOURCE = "PaymentController"


def _response(status_code: int, success: bool, message: str, data=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"success": success, "message": message, "data": data})
    )


def _unsupported(error: UnsupportedPaymentTypeError) -> JSONResponse:
    return _response(400, False, str(error), {"supported_methods": error.supported_methods})


@router.post("/process")
@inject
def process_payment(
    request: PaymentRequestBody,
    factory: PaymentFactory = Depends(Provide[Container.payment_factory]),
    logger: LoggerService = Depends(Provide[Container.logger_service]),
):
    """Process a payment with the method named by `payment_type`.

    Returns:
        200 with the payment result on success, 400 for missing fields,
        unsupported types or failed validation, 500 for unexpected faults.
    """
    logger.log_info(
        f"Payment request received - Type: {request.payment_type}, Amount: {request.amount}",
        SOURCE
    )

    try:
        if not request.payment_type or not request.payment_type.strip():
            logger.log_error("Payment type must not be empty", SOURCE)
            return _response(400, False, "Payment type is required")

        if request.amount <= 0:
            logger.log_error(f"Invalid amount: {request.amount}", SOURCE)
            return _response(400, False, "Amount must be greater than 0")

        payment = request.to_payment_request()
        payment_method = factory.create_payment_method(payment.payment_type)
        result = payment_method.process_request(payment)

        if result.success:
            logger.log_info(f"Payment succeeded - Transaction: {result.transaction_id}", SOURCE)
            return _response(200, True, "Payment succeeded", result.to_dict())

        logger.log_error(f"Payment failed - {result.message}", SOURCE)
        return _response(400, False, result.message, result.to_dict())

    except UnsupportedPaymentTypeError as e:
        logger.log_error(f"Unsupported payment method: {e}", SOURCE)
        return _unsupported(e)

    except Exception as e:
        logger.log_error(
            f"Error processing payment: {type(e).__name__}: {e}\n{traceback.format_exc()}",
            SOURCE
        )
        return _response(500, False, "An error occurred while processing the payment")


@router.get("/methods")
@inject
def get_payment_methods(
    factory: PaymentFactory = Depends(Provide[Container.payment_factory]),
    logger: LoggerService = Depends(Provide[Container.logger_service]),
):
    """List supported payment methods with limits, fees and required fields."""
    logger.log_info("Listing payment methods", SOURCE)
    methods = [info.to_dict() for info in factory.get_payment_methods_info()]
    return jsonable_encoder({"success": True, "message": "Supported payment methods", "data": methods})


@router.get("/calculate-fee")
@inject
def calculate_fee(
    amount: Decimal = Query(...),
    payment_type: Optional[str] = Query(None),
    payment_type_camel: Optional[str] = Query(None, alias="paymentType"),
    factory: PaymentFactory = Depends(Provide[Container.payment_factory]),
    logger: LoggerService = Depends(Provide[Container.logger_service]),
):
    """Estimate the transaction fee and total for an amount.

    The type may be given as `payment_type` or `paymentType`.
    """
    payment_type = payment_type or payment_type_camel
    if not payment_type or not payment_type.strip():
        logger.log_error("Payment type must not be empty", SOURCE)
        return _response(400, False, "Payment type is required")

    logger.log_info(f"Calculating fee for {payment_type} with amount: {amount}", SOURCE)

    try:
        payment_method = factory.create_payment_method(payment_type)
    except UnsupportedPaymentTypeError as e:
        logger.log_warning(f"Fee requested for unsupported method: {payment_type}", SOURCE)
        return _unsupported(e)

    fee = payment_method.get_transaction_fee(amount)
    return jsonable_encoder({
        "success": True,
        "message": "Fee calculated",
        "data": {
            "payment_type": payment_method.payment_type,
            "amount": amount,
            "transaction_fee": fee,
            "total_amount": amount + fee,
            "fee_percentage": (fee / amount * 100) if amount > 0 else Decimal(0),
        }
    })


@router.get("/demo-factory")
@inject
def demo_factory(
    factory: PaymentFactory = Depends(Provide[Container.payment_factory]),
    logger: LoggerService = Depends(Provide[Container.logger_service]),
):
    """Create one object per canonical type to show the factory at work."""
    logger.log_info("Factory Method pattern demo", SOURCE)

    results = []
    for payment_type in factory.get_supported_payment_methods():
        payment = factory.create_payment_method(payment_type)
        results.append({
            "payment_type": payment.payment_type,
            "class_name": type(payment).__name__,
            "object_id": id(payment),
            "sample_fee": payment.get_transaction_fee(Decimal(1_000_000)),
        })

    return jsonable_encoder({
        "success": True,
        "message": "Factory Method demo - every call creates a new instance",
        "data": {
            "payment_methods": results,
            "factory_type": type(factory).__name__,
        }
    })


@router.get("/statistics")
@inject
def get_statistics(
    factory: PaymentFactory = Depends(Provide[Container.payment_factory]),
    logger: LoggerService = Depends(Provide[Container.logger_service]),
):
    logger.log_info("Reading factory creation statistics", SOURCE)
    return {"success": True, "message": "Factory creation statistics", "data": factory.get_creation_statistics()}


@router.delete("/statistics")
@inject
def reset_statistics(
    factory: PaymentFactory = Depends(Provide[Container.payment_factory]),
    logger: LoggerService = Depends(Provide[Container.logger_service]),
):
    logger.log_warning("Resetting factory creation statistics", SOURCE)
    factory.reset_statistics()
    return {"success": True, "message": "Factory statistics reset", "data": factory.get_creation_statistics()}
