"""Unit tests for comment use cases."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from tbn.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from tbn.domain.error import NotFoundError
from tbn.domain.repository import AccountRepository
from tests.conftest import make_account
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_for_active_account(self, unit_env):
        """Active author should be able to comment."""
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        await account_repo.save(make_account("writer@example.com", nickname="작가"))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                region_code="5", author_email="writer@example.com", text="안녕하세요"
            )
        )

        # Assert
        assert response.region_code == "5"
        assert response.author_nickname == "작가"
        assert response.text == "안녕하세요"
        assert response.comment_id

    @pytest.mark.asyncio
    async def test_create_comment_withdrawn_author_raises(self, unit_env):
        """Withdrawn accounts are not found when commenting."""
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(CreateCommentUseCase)
        await account_repo.save(make_account("gone@example.com", deleted=True))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    region_code="5", author_email="gone@example.com", text="hi"
                )
            )

    def test_empty_text_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            CreateCommentRequest(region_code="5", author_email="a@b.c", text="")


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_list_comments_paginates(self, unit_env):
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        create = await unit_env.get(CreateCommentUseCase)
        use_case = await unit_env.get(ListCommentsUseCase)
        await account_repo.save(make_account("pager@example.com"))
        for i in range(3):
            await create.execute(
                CreateCommentRequest(
                    region_code="7", author_email="pager@example.com", text=f"c{i}"
                )
            )

        # Act
        page = await use_case.execute(
            ListCommentsRequest(region_code="7", limit=2, offset=0)
        )
        rest = await use_case.execute(
            ListCommentsRequest(region_code="7", limit=2, offset=2)
        )

        # Assert
        assert len(page.comments) == 2
        assert len(rest.comments) == 1
        seen = {c.comment_id for c in page.comments + rest.comments}
        assert len(seen) == 3

    def test_limit_is_bounded(self):
        with pytest.raises(PydanticValidationError):
            ListCommentsRequest(region_code="7", limit=101)
