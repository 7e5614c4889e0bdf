"""Unit tests for QuestionService (query engine and lifecycle)."""

from uuid import uuid4

import pytest

from stackit.domain.error import ForbiddenError, NotFoundError, ValidationError
from stackit.domain.repository import (
    QuestionFilter,
    QuestionRepository,
    QuestionSortOrder,
)
from stackit.domain.service import QuestionService
from stackit.domain.value import QuestionId, TagName, UserId
from tests.factories import make_question
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _seed(unit_env, questions):
    repo = await unit_env.get(QuestionRepository)
    for question in questions:
        await repo.save(question)
    return repo


class TestListQuestions:
    """Tests for filtering, sorting and pagination."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page_size", [1, 2, 3, 4, 7, 10])
    async def test_pages_cover_filtered_set_exactly_once(self, unit_env, page_size):
        """Concatenated pages contain every match once and nothing else."""
        # Arrange
        service = await unit_env.get(QuestionService)
        questions = [
            make_question(tags=["python"], votes=i % 3, minutes=i % 4)
            for i in range(9)
        ]
        others = [make_question(tags=["rust"]) for _ in range(3)]
        await _seed(unit_env, questions + others)

        # Act
        seen = []
        page_number = 1
        while True:
            page = await service.list_questions(
                QuestionFilter(
                    tags=[TagName("python")],
                    sort=QuestionSortOrder.VOTES,
                    page=page_number,
                    page_size=page_size,
                )
            )
            if not page.items:
                break
            seen.extend(q.id for q in page.items)
            page_number += 1

        # Assert
        assert len(seen) == len(set(seen)) == 9
        assert set(seen) == {q.id for q in questions}
        assert page.total == 9

    @pytest.mark.asyncio
    async def test_tag_filter_matches_any_requested_tag(self, unit_env):
        """A question qualifies if it carries at least one requested tag."""
        # Arrange
        service = await unit_env.get(QuestionService)
        react = make_question(tags=["react", "hooks"])
        ts = make_question(tags=["typescript"])
        go = make_question(tags=["go"])
        untagged = make_question(tags=[])
        await _seed(unit_env, [react, ts, go, untagged])

        # Act
        page = await service.list_questions(
            QuestionFilter(tags=[TagName("react"), TagName("TypeScript")])
        )

        # Assert
        assert {q.id for q in page.items} == {react.id, ts.id}
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_on_title_or_description(self, unit_env):
        """Search matches title or description regardless of case."""
        # Arrange
        service = await unit_env.get(QuestionService)
        in_title = make_question(title="Understanding React hooks")
        in_description = make_question(
            description="My useEffect HOOK fires twice in strict mode."
        )
        unrelated = make_question(title="Configuring nginx upstreams")
        await _seed(unit_env, [in_title, in_description, unrelated])

        # Act
        page = await service.list_questions(QuestionFilter(search="hook"))

        # Assert
        assert {q.id for q in page.items} == {in_title.id, in_description.id}

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, unit_env):
        """Percent and underscore in a search term are plain characters."""
        # Arrange
        service = await unit_env.get(QuestionService)
        literal = make_question(title="Why is 100% CPU used by my loop?")
        other = make_question(title="Why is 100 CPU used by my loop?")
        await _seed(unit_env, [literal, other])

        # Act
        page = await service.list_questions(QuestionFilter(search="100%"))

        # Assert
        assert [q.id for q in page.items] == [literal.id]

    @pytest.mark.asyncio
    async def test_blank_search_is_ignored(self, unit_env):
        """Whitespace-only search returns everything."""
        # Arrange
        service = await unit_env.get(QuestionService)
        await _seed(unit_env, [make_question(), make_question()])

        # Act
        page = await service.list_questions(QuestionFilter(search="   "))

        # Assert
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_votes_sort_breaks_ties_by_newest(self, unit_env):
        """Votes descending, then created_at descending among equal votes."""
        # Arrange
        service = await unit_env.get(QuestionService)
        old_top = make_question(votes=5, minutes=0)
        new_top = make_question(votes=5, minutes=10)
        middle = make_question(votes=2, minutes=20)
        negative = make_question(votes=-1, minutes=30)
        await _seed(unit_env, [middle, old_top, negative, new_top])

        # Act
        page = await service.list_questions(
            QuestionFilter(sort=QuestionSortOrder.VOTES)
        )

        # Assert
        assert [q.id for q in page.items] == [
            new_top.id,
            old_top.id,
            middle.id,
            negative.id,
        ]

    @pytest.mark.asyncio
    async def test_newest_oldest_and_views_orders(self, unit_env):
        """Each sort key orders the same set differently."""
        # Arrange
        service = await unit_env.get(QuestionService)
        first = make_question(views=1, minutes=0)
        second = make_question(views=9, minutes=5)
        third = make_question(views=4, minutes=10)
        await _seed(unit_env, [second, third, first])

        # Act
        newest = await service.list_questions(QuestionFilter())
        oldest = await service.list_questions(
            QuestionFilter(sort=QuestionSortOrder.OLDEST)
        )
        views = await service.list_questions(
            QuestionFilter(sort=QuestionSortOrder.VIEWS)
        )

        # Assert
        assert [q.id for q in newest.items] == [third.id, second.id, first.id]
        assert [q.id for q in oldest.items] == [first.id, second.id, third.id]
        assert [q.id for q in views.items] == [second.id, third.id, first.id]

    @pytest.mark.asyncio
    async def test_author_filter(self, unit_env, user_id):
        """Only the given author's questions are returned."""
        # Arrange
        service = await unit_env.get(QuestionService)
        mine = make_question(author_id=user_id)
        theirs = make_question()
        await _seed(unit_env, [mine, theirs])

        # Act
        page = await service.list_questions(QuestionFilter(author_id=user_id))

        # Assert
        assert [q.id for q in page.items] == [mine.id]

    @pytest.mark.asyncio
    async def test_inactive_questions_are_never_listed(self, unit_env):
        """Soft-deleted questions drop out of results and totals."""
        # Arrange
        service = await unit_env.get(QuestionService)
        active = make_question()
        deleted = make_question(is_active=False)
        await _seed(unit_env, [active, deleted])

        # Act
        page = await service.list_questions(QuestionFilter())

        # Assert
        assert [q.id for q in page.items] == [active.id]
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty_with_total(self, unit_env):
        """Requesting beyond the last page yields no items but the real total."""
        # Arrange
        service = await unit_env.get(QuestionService)
        await _seed(unit_env, [make_question() for _ in range(3)])

        # Act
        page = await service.list_questions(QuestionFilter(page=5, page_size=2))

        # Assert
        assert page.items == []
        assert page.total == 3
        assert page.total_pages == 2


class TestGetQuestion:
    """Tests for get_question."""

    @pytest.mark.asyncio
    async def test_each_read_counts_one_view(self, unit_env):
        """Views grow by one per read and the new count is returned."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question = make_question(views=3)
        await _seed(unit_env, [question])

        # Act
        first = await service.get_question(question.id)
        second = await service.get_question(question.id)

        # Assert
        assert first.views == 4
        assert second.views == 5

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        """Unknown ids are NotFound."""
        service = await unit_env.get(QuestionService)

        with pytest.raises(NotFoundError, match="Question not found"):
            await service.get_question(QuestionId(uuid4()))

    @pytest.mark.asyncio
    async def test_inactive_question_raises_not_found(self, unit_env):
        """Soft-deleted questions are NotFound and gain no views."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question = make_question(is_active=False)
        repo = await _seed(unit_env, [question])

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.get_question(question.id)
        assert (await repo.find_by_id(question.id)).views == 0


class TestCreateQuestion:
    """Tests for create_question."""

    @pytest.mark.asyncio
    async def test_create_normalizes_and_persists(self, unit_env, user_id):
        """Created questions start at zero and are stored trimmed."""
        # Arrange
        service = await unit_env.get(QuestionService)
        repo = await unit_env.get(QuestionRepository)

        # Act
        question = await service.create_question(
            title="  How to use React hooks with TypeScript?  ",
            description="I keep getting type errors when typing useState.",
            tags=["React", "TypeScript"],
            author_id=user_id,
        )

        # Assert
        assert question.title == "How to use React hooks with TypeScript?"
        assert [t.root for t in question.tags] == ["react", "typescript"]
        assert question.votes == 0
        assert question.views == 0
        assert question.answer_ids == []
        assert await repo.find_by_id(question.id) == question

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,description,tags",
        [
            ("Too short", "A description that is long enough.", []),
            ("A perfectly fine title", "too short", []),
            ("A perfectly fine title", "A description that is long enough.", ["a"] * 6),
            ("A perfectly fine title", "A description that is long enough.", ["x y"]),
        ],
    )
    async def test_invalid_input_raises_validation_error(
        self, unit_env, user_id, title, description, tags
    ):
        """Field rule violations surface as domain ValidationError."""
        service = await unit_env.get(QuestionService)

        with pytest.raises(ValidationError):
            await service.create_question(title, description, tags, user_id)


class TestDeleteQuestion:
    """Tests for delete_question."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env, user_id):
        """Deleting hides the question from reads and listings."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question = make_question(author_id=user_id)
        await _seed(unit_env, [question])

        # Act
        await service.delete_question(question.id, user_id)

        # Assert
        with pytest.raises(NotFoundError):
            await service.get_question(question.id)
        assert (await service.list_questions(QuestionFilter())).total == 0

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        """Only the author may delete."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question = make_question()
        await _seed(unit_env, [question])

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.delete_question(question.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_twice_raises_not_found(self, unit_env, user_id):
        """A deleted question cannot be deleted again."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question = make_question(author_id=user_id)
        await _seed(unit_env, [question])
        await service.delete_question(question.id, user_id)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.delete_question(question.id, user_id)
