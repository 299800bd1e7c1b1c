"""Identity reconciliation domain service.

Maps an identity asserted by a federated provider onto exactly one account:
an existing one (re-activated if it was withdrawn) or a new one.
"""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from tbn.domain.error import ConflictError
from tbn.domain.model import Account
from tbn.domain.repository import AccountRepository
from tbn.domain.value import AccountId, AuthProvider

from .base import Service
from .nickname import SuffixFactory, compute_nickname, random_suffix


class IdentityReconciliationService(Service):
    """Find-or-create-or-restore for federated logins."""

    def __init__(
        self,
        account_repository: AccountRepository,
        suffix_factory: SuffixFactory = random_suffix,
    ) -> None:
        """Initialize identity reconciliation service.

        Args:
            account_repository: Account repository
            suffix_factory: Suffix source for synthesized nicknames
        """
        self.account_repository = account_repository
        self.suffix_factory = suffix_factory

    async def reconcile(
        self,
        email: str,
        display_name: str | None,
        avatar_url: str | None,
        provider: AuthProvider,
        provider_subject_id: str,
    ) -> Account:
        """Resolve a federated identity to an active account.

        If a concurrent request created or claimed the same identity first,
        the store rejects our write with a ConflictError; the lookup is then
        repeated once so the other request's account gets updated instead.

        Args:
            email: Email asserted by the provider
            display_name: Name asserted by the provider
            avatar_url: Picture asserted by the provider
            provider: Identity provider
            provider_subject_id: Stable subject ID on the provider

        Returns:
            The active, persisted account

        Raises:
            ConflictError: If the identity still collides after the retry
        """
        with logfire.span(
            "identity_service.reconcile",
            email=email,
            provider=provider.value,
            provider_subject_id=provider_subject_id,
        ):
            try:
                return await self._reconcile_once(
                    email, display_name, avatar_url, provider, provider_subject_id
                )
            except ConflictError as e:
                logfire.warn(
                    "Reconcile collided with a concurrent write, retrying",
                    email=email,
                    error=str(e),
                )
                return await self._reconcile_once(
                    email, display_name, avatar_url, provider, provider_subject_id
                )

    async def _reconcile_once(
        self,
        email: str,
        display_name: str | None,
        avatar_url: str | None,
        provider: AuthProvider,
        provider_subject_id: str,
    ) -> Account:
        account = await self.account_repository.find_by_provider_identity(
            provider, provider_subject_id
        )
        if account is None:
            account = await self.account_repository.find_by_email_and_provider(
                email, provider
            )

        nickname = compute_nickname(display_name, email, self.suffix_factory)
        now = datetime.now(timezone.utc)

        if account is None:
            account = Account(
                id=AccountId(uuid4()),
                email=email,
                display_name=display_name,
                nickname=nickname,
                avatar_url=avatar_url,
                provider=provider,
                provider_subject_id=provider_subject_id,
                deleted=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.account_repository.save(account)
            logfire.info("Account created", account_id=str(saved.id), email=email)
            return saved

        if account.deleted:
            updated = account.model_copy(
                update={
                    "deleted": False,
                    "deleted_at": None,
                    "nickname": nickname,
                    "updated_at": now,
                }
            )
            saved = await self.account_repository.save(updated)
            logfire.info("Account restored", account_id=str(saved.id), email=email)
            return saved

        changes: dict = {
            "display_name": display_name,
            "avatar_url": avatar_url,
            "provider_subject_id": provider_subject_id,
            "updated_at": now,
        }
        if not account.nickname:
            changes["nickname"] = nickname
        saved = await self.account_repository.save(account.model_copy(update=changes))
        logfire.info("Account updated", account_id=str(saved.id), email=email)
        return saved
