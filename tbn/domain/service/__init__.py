"""Domain services."""

from .account_service import AccountService
from .auth_service import AuthService, IdentityVerifier
from .base import Service
from .broadcast_service import BroadcastPageClient, BroadcastService
from .comment_service import CommentService
from .identity_service import IdentityReconciliationService
from .jwt_service import JWTService
from .lifecycle_service import AccountLifecycleService
from .nickname import NICKNAME_MAX_LENGTH, compute_nickname
from .password_service import PasswordService

__all__ = [
    "AccountLifecycleService",
    "AccountService",
    "AuthService",
    "BroadcastPageClient",
    "BroadcastService",
    "CommentService",
    "IdentityReconciliationService",
    "IdentityVerifier",
    "JWTService",
    "PasswordService",
    "Service",
    "compute_nickname",
    "NICKNAME_MAX_LENGTH",
]
