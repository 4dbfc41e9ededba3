"""Unit tests for ListPublishedPostsUseCase."""

from datetime import datetime, timedelta, timezone

import pytest

from scribe.application.usecase.post import (
    ListPublishedPostsRequest,
    ListPublishedPostsUseCase,
)
from scribe.domain.repository import PostRepository, UserRepository
from scribe.domain.value import PostState
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


async def seed(unit_env):
    """Two authors, four published posts and one draft."""
    user_repo = await unit_env.get(UserRepository)
    post_repo = await unit_env.get(PostRepository)

    ada = await user_repo.create(make_user("Ada", "Lovelace"))
    alan = await user_repo.create(make_user("Alan", "Turing"))

    posts = [
        make_post(ada.id, title="Engines", tags=["math"], read_count=5),
        make_post(ada.id, title="Notes", tags=["history"], read_count=1),
        make_post(alan.id, title="Machines", tags=["math", "ai"], read_count=9),
        make_post(alan.id, title="Morphogenesis", tags=["biology"]),
        make_post(alan.id, title="Secret", state=PostState.DRAFT),
    ]
    for i, post in enumerate(posts):
        post = post.model_copy(update={"created_at": BASE_TIME + timedelta(days=i)})
        await post_repo.create(post)

    return ada, alan


class TestListPublishedPosts:
    """Tests for the public listing."""

    @pytest.mark.asyncio
    async def test_lists_only_published_newest_first(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        response = await use_case.execute(ListPublishedPostsRequest())

        # Assert
        titles = [post.title for post in response.blogs]
        assert titles == ["Morphogenesis", "Machines", "Notes", "Engines"]
        assert response.total_pages == 1
        assert response.current_page == 1

    @pytest.mark.asyncio
    async def test_items_carry_author_display_fields(self, unit_env):
        # Arrange
        ada, _ = await seed(unit_env)
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        response = await use_case.execute(ListPublishedPostsRequest(title="engines"))

        # Assert
        assert len(response.blogs) == 1
        author = response.blogs[0].author
        assert author.id == str(ada.id)
        assert author.first_name == "Ada"
        assert author.email == ada.email.root

    @pytest.mark.asyncio
    async def test_tags_match_any(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        response = await use_case.execute(
            ListPublishedPostsRequest(tags="biology, history")
        )

        # Assert
        assert {post.title for post in response.blogs} == {"Morphogenesis", "Notes"}

    @pytest.mark.asyncio
    async def test_author_filter_matches_first_or_last_name(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        response = await use_case.execute(ListPublishedPostsRequest(author="turing"))

        # Assert
        assert {post.title for post in response.blogs} == {"Machines", "Morphogenesis"}

    @pytest.mark.asyncio
    async def test_unknown_author_returns_empty_page(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        response = await use_case.execute(
            ListPublishedPostsRequest(author="Hopper", page="3")
        )

        # Assert
        assert response.blogs == []
        assert response.total_pages == 0
        assert response.current_page == 3

    @pytest.mark.asyncio
    async def test_order_by_read_count(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        response = await use_case.execute(
            ListPublishedPostsRequest(order_by="read_count")
        )

        # Assert
        assert [post.read_count for post in response.blogs] == [9, 5, 1, 0]

    @pytest.mark.asyncio
    async def test_pagination(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        response = await use_case.execute(
            ListPublishedPostsRequest(page="2", limit="3")
        )

        # Assert
        assert [post.title for post in response.blogs] == ["Engines"]
        assert response.total_pages == 2
        assert response.current_page == 2

    @pytest.mark.asyncio
    async def test_invalid_page_and_limit_fall_back_to_defaults(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        response = await use_case.execute(
            ListPublishedPostsRequest(page="abc", limit="-4")
        )

        # Assert
        assert response.current_page == 1
        assert len(response.blogs) == 4

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        response = await use_case.execute(ListPublishedPostsRequest(page="9"))

        # Assert
        assert response.blogs == []
        assert response.total_pages == 1
        assert response.current_page == 9

    @pytest.mark.asyncio
    async def test_listing_does_not_count_reads(self, unit_env):
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        await use_case.execute(ListPublishedPostsRequest())
        response = await use_case.execute(ListPublishedPostsRequest(title="Notes"))

        # Assert
        assert response.blogs[0].read_count == 1

    @pytest.mark.asyncio
    async def test_twenty_five_posts_split_into_two_pages_of_twenty(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        author = await user_repo.create(make_user())
        for i in range(25):
            await post_repo.create(
                make_post(
                    author.id,
                    title=f"Post {i}",
                    created_at=BASE_TIME + timedelta(minutes=i),
                )
            )
        use_case = await unit_env.get(ListPublishedPostsUseCase)

        # Act
        first = await use_case.execute(ListPublishedPostsRequest(page="1", limit="20"))
        second = await use_case.execute(ListPublishedPostsRequest(page="2", limit="20"))

        # Assert
        assert len(first.blogs) == 20
        assert first.total_pages == 2
        assert first.current_page == 1
        assert len(second.blogs) == 5
        assert second.total_pages == 2
        assert second.current_page == 2
        assert {b.id for b in first.blogs}.isdisjoint({b.id for b in second.blogs})
