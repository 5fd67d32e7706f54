"""Map storefront exceptions to JSON error responses.

Every error body has the shape ``{"message": str, "errors": {field: [str]}}``.
Unexpected failures are logged and answered with a generic 500 body.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.domain import logger
from storefront.exceptions import EmptyCart, InsufficientStock, InvalidOrderData


def _field_errors(exc) -> dict:
    messages = getattr(exc, "messages", None)
    if isinstance(messages, dict):
        return {field: list(msgs) if isinstance(msgs, (list, tuple)) else [str(msgs)] for field, msgs in messages.items()}
    return {}


def _first_message(errors: dict, default: str) -> str:
    for msgs in errors.values():
        if msgs:
            return msgs[0]
    return default


def _error_response(status_code: int, message: str, errors: dict, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, "errors": errors, **extra})


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    errors = _field_errors(exc)
    return _error_response(404, _first_message(errors, "Not found"), errors)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(400, "Invalid data", _field_errors(exc))


async def insufficient_stock_handler(request: Request, exc: InsufficientStock) -> JSONResponse:
    logger.info("Rejected cart add for insufficient stock", product_id=exc.product_id, available=exc.available)
    return _error_response(400, "Insufficient stock", _field_errors(exc), available=exc.available)


async def empty_cart_handler(request: Request, exc: EmptyCart) -> JSONResponse:
    return _error_response(400, "Cart is empty", _field_errors(exc))


async def invalid_order_data_handler(request: Request, exc: InvalidOrderData) -> JSONResponse:
    return _error_response(400, "Invalid order data", _field_errors(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in jsonable_encoder(exc.errors()):
        field = ".".join(str(part) for part in error.get("loc", ()))
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return _error_response(400, "Invalid request", errors)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", method=request.method, path=request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(InsufficientStock, insufficient_stock_handler)
    app.add_exception_handler(EmptyCart, empty_cart_handler)
    app.add_exception_handler(InvalidOrderData, invalid_order_data_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
