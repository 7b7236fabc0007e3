"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from qna.domain.model import Question
from qna.domain.repository import QuestionRepository, QuestionSortOrder
from qna.domain.value import QuestionId, TagName, UserId, VotableType, VoteType
from qna.persistence.mappers import question_to_dict, row_to_question
from qna.persistence.repository.vote import VoteLedgerStore
from qna.persistence.tables import questions_search_document, questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        self.votes = VoteLedgerStore(session, VotableType.QUESTION)

    def _filter(
        self,
        stmt: Select,
        tags: Optional[List[TagName]],
        search: Optional[str],
    ) -> Select:
        stmt = stmt.where(questions_table.c.is_active.is_(True))

        # Match any of the requested tags
        if tags:
            stmt = stmt.where(questions_table.c.tags.overlap([t.root for t in tags]))

        if search:
            stmt = stmt.where(
                questions_search_document.op("@@")(
                    func.plainto_tsquery("english", search)
                )
            )

        return stmt

    async def _to_models(self, rows: list) -> List[Question]:
        ledgers = await self.votes.load([row["id"] for row in rows])
        return [row_to_question(dict(row), ledgers.get(row["id"])) for row in rows]

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, including soft-deleted ones."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                return None

            questions = await self._to_models([row])
            return questions[0]

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tags: Optional[List[TagName]] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find active questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            tags=[t.root for t in tags] if tags else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filter(select(questions_table), tags, search)

            if sort == QuestionSortOrder.OLDEST:
                stmt = stmt.order_by(asc(questions_table.c.created_at))
            elif sort == QuestionSortOrder.VOTES:
                # Raw upvote count first, fewer downvotes breaks ties
                upvotes = self.votes.count_subquery(questions_table.c.id, VoteType.UP)
                downvotes = self.votes.count_subquery(
                    questions_table.c.id, VoteType.DOWN
                )
                stmt = stmt.order_by(
                    desc(upvotes), asc(downvotes), desc(questions_table.c.created_at)
                )
            elif sort == QuestionSortOrder.VIEWS:
                stmt = stmt.order_by(
                    desc(questions_table.c.views), desc(questions_table.c.created_at)
                )
            else:
                stmt = stmt.order_by(desc(questions_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            rows = result.mappings().all()

            questions = await self._to_models(list(rows))
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(
        self,
        tags: Optional[List[TagName]] = None,
        search: Optional[str] = None,
    ) -> int:
        """Count active questions matching the given filters."""
        stmt = self._filter(
            select(func.count()).select_from(questions_table), tags, search
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self, author_id: UserId, limit: int = 5
    ) -> List[Question]:
        """Find a user's most recent active questions."""
        stmt = (
            select(questions_table)
            .where(
                questions_table.c.author_id == author_id,
                questions_table.c.is_active.is_(True),
            )
            .order_by(desc(questions_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return await self._to_models(list(result.mappings().all()))

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's active questions."""
        stmt = (
            select(func.count())
            .select_from(questions_table)
            .where(
                questions_table.c.author_id == author_id,
                questions_table.c.is_active.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Save a question (create or update), including its vote ledger."""
        with logfire.span("question_repository.save", question_id=str(question.id)):
            question_dict = question_to_dict(question)

            exists_stmt = select(questions_table.c.id).where(
                questions_table.c.id == question.id
            )
            existing = (await self.session.execute(exists_stmt)).first()

            if existing:
                # views is only changed through increment_views
                question_dict.pop("views")
                stmt = (
                    questions_table.update()
                    .where(questions_table.c.id == question.id)
                    .values(**question_dict)
                )
            else:
                logfire.info("Inserting new question", question_id=str(question.id))
                stmt = questions_table.insert().values(**question_dict)
            await self.session.execute(stmt)

            await self.votes.replace(question.id, question.votes)

            await self.session.flush()
            return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
