"""Integration tests for PostgresUserRepository."""

from uuid import uuid4

import pytest

from forum.domain.model.post import PostDraft
from forum.domain.repository import ForumRepository, ThreadRepository, UserRepository
from forum.domain.service import PostService
from forum.domain.value import Slug
from tests.conftest import seed_forum, seed_thread, seed_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence, assumes a migrated database
integration_env = create_env_fixture(unmock={"persistence"})


def _unique_id() -> int:
    return uuid4().int % 10**12


class TestFindByForumIntegration:
    """Integration tests for find_by_forum."""

    @pytest.mark.asyncio
    async def test_union_of_thread_and_post_authors(self, integration_env):
        """Authors appear once, ordered by lower-cased nickname."""
        # Arrange
        suffix = uuid4().hex[:8]
        user_repo = await integration_env.get(UserRepository)
        owner, replier, outsider = (
            f"B{suffix}",
            f"a{suffix}",
            f"c{suffix}",
        )
        for nickname in (owner, replier, outsider):
            await seed_user(user_repo, nickname, user_id=_unique_id())
        forum_slug = f"uf-{suffix}"
        await seed_forum(
            await integration_env.get(ForumRepository),
            forum_slug,
            owner,
            forum_id=_unique_id(),
        )
        thread = await seed_thread(
            await integration_env.get(ThreadRepository),
            _unique_id(),
            forum_slug,
            owner,
        )
        post_service = await integration_env.get(PostService)
        await post_service.create_posts(
            thread,
            [
                PostDraft(author=replier, message="ahoy"),
                PostDraft(author=owner, message="aye"),
            ],
        )

        # Act
        users = await user_repo.find_by_forum(Slug(forum_slug))
        after = await user_repo.find_by_forum(Slug(forum_slug), since=replier.upper())
        reverse = await user_repo.find_by_forum(Slug(forum_slug), desc=True, limit=1)

        # Assert
        assert [u.nickname.root for u in users] == [replier, owner]
        assert [u.nickname.root for u in after] == [owner]
        assert [u.nickname.root for u in reverse] == [owner]
