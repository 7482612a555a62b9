import json
from functools import wraps
from typing import Callable

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ValidationError

from flight_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
    ResourceUnavailableException,
    StoreFailureException,
    ValidationException,
)

# 先に一致したものを採用する（サブクラスを先に並べる）
_STATUS_CODES: list[tuple[type[DomainException], int]] = [
    (ResourceNotFoundException, 404),
    (DuplicateResourceException, 409),
    (OptimisticLockException, 409),
    (ResourceUnavailableException, 409),
    (ValidationException, 422),
    (BusinessRuleViolationException, 422),
    (StoreFailureException, 503),
]


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: dict | list | None = None


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def status_code_for(exc: DomainException) -> int:
    """ドメイン例外に対応する HTTP ステータスコード"""
    for exc_type, status_code in _STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return 400


def error_response(exc: DomainException) -> dict:
    """ドメイン例外からエラーレスポンスを生成する"""
    body = ErrorResponse(
        error_code=exc.error_code,
        message=exc.message or str(exc),
        details=exc.details(),
    ).model_dump(exclude_none=True)
    return api_response(status_code_for(exc), body)


def validation_error_response(exc: ValidationError) -> dict:
    """Pydantic の ValidationError から 422 レスポンスを生成する"""
    details = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    body = ErrorResponse(
        error_code=ValidationException.error_code,
        message="Invalid request",
        details=details,
    ).model_dump(exclude_none=True)
    return api_response(422, body)


def handle_errors(logger: Logger) -> Callable:
    """Lambda ハンドラの例外を API レスポンスに変換するデコレータ

    - ValidationError (pydantic) -> 422
    - DomainException -> 例外の種類に応じたステータス
    - ValueError (Value Object の検証) -> 422
    - それ以外 -> ログを出力して 500
    """

    def decorator(handler: Callable[..., dict]) -> Callable[..., dict]:
        @wraps(handler)
        def wrapper(event, context) -> dict:
            try:
                return handler(event, context)
            except ValidationError as e:
                logger.info("Request validation failed", extra={"errors": e.errors()})
                return validation_error_response(e)
            except DomainException as e:
                logger.warning(
                    "Request rejected by domain rule",
                    extra={
                        "error_code": e.error_code,
                        "reason": e.message,
                        "details": e.details(),
                    },
                )
                return error_response(e)
            except ValueError as e:
                # Value Object の生成失敗（空の ID など）
                logger.info("Invalid request value", extra={"reason": str(e)})
                body = ErrorResponse(
                    error_code=ValidationException.error_code, message=str(e)
                ).model_dump(exclude_none=True)
                return api_response(422, body)
            except Exception:
                logger.exception("Unhandled error")
                return api_response(500, {"message": "Internal server error"})

        return wrapper

    return decorator
