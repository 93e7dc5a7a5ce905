"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── InvalidFlagError
    └── ApplicationError     (application.py)
        └── ConfigError      (tierflags.config.validation)
"""

from tierflags.kernel.errors.application import ApplicationError
from tierflags.kernel.errors.base import BaseError
from tierflags.kernel.errors.domain import (
    DomainError,
    InvalidFlagError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidFlagError",
    "ValidationError",
]
