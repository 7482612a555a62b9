from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
    ResourceUnavailableException,
    StoreFailureException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "ResourceUnavailableException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "ValidationException",
    "StoreFailureException",
]
