from typing import ClassVar


class DomainException(Exception):
    """ドメイン層で発生する基底例外

    error_code はハンドラがエラーレスポンスに載せる機械可読なコード。
    """

    error_code: ClassVar[str] = "DOMAIN_ERROR"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def details(self) -> dict | None:
        """エラーレスポンスに含める追加情報"""
        return None


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    error_code = "RESOURCE_NOT_FOUND"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    error_code = "BUSINESS_RULE_VIOLATION"


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    error_code = "DUPLICATE_RESOURCE"


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスやバージョンが期待値と異なる場合）"""

    error_code = "OPTIMISTIC_LOCK_CONFLICT"


class ValidationException(DomainException):
    """安全なデフォルト値が存在しない入力エラー（必須項目の欠落など）"""

    error_code = "VALIDATION_ERROR"

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"{field} is required")
        self.field = field

    def details(self) -> dict | None:
        return {"field": self.field}


class StoreFailureException(DomainException):
    """永続化層の失敗（元の例外を __cause__ に保持する）"""

    error_code = "STORE_FAILURE"


class ResourceUnavailableException(BusinessRuleViolationException):
    """リソースは存在するが現在は受け付けられない（販売停止・満席など）"""

    error_code = "RESOURCE_UNAVAILABLE"
