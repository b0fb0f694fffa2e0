"""Service layer — registry queries wrapped in the ServiceResult contract."""

from deobf.services.lookup import LookupService
from deobf.services.result import ServiceError, ServiceResult

__all__ = ["LookupService", "ServiceError", "ServiceResult"]
