"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from qna.domain.model import Answer
from qna.domain.repository import AnswerRepository
from qna.domain.value import AnswerId, UserId, VotableType
from qna.persistence.mappers import answer_to_dict, row_to_answer
from qna.persistence.repository.vote import VoteLedgerStore
from qna.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        self.votes = VoteLedgerStore(session, VotableType.ANSWER)

    async def _to_models(self, rows: list) -> List[Answer]:
        ledgers = await self.votes.load([row["id"] for row in rows])
        return [row_to_answer(dict(row), ledgers.get(row["id"])) for row in rows]

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID, including soft-deleted ones."""
        with logfire.span("answer_repository.find_by_id", answer_id=str(answer_id)):
            stmt = select(answers_table).where(answers_table.c.id == answer_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                return None

            answers = await self._to_models([row])
            return answers[0]

    async def find_by_ids(self, answer_ids: List[AnswerId]) -> List[Answer]:
        """Find several answers at once, in the order of answer_ids."""
        if not answer_ids:
            return []

        stmt = select(answers_table).where(answers_table.c.id.in_(answer_ids))
        result = await self.session.execute(stmt)
        answers = {a.id: a for a in await self._to_models(list(result.mappings().all()))}
        return [answers[a] for a in answer_ids if a in answers]

    async def find_by_author(self, author_id: UserId, limit: int = 5) -> List[Answer]:
        """Find a user's most recent active answers."""
        stmt = (
            select(answers_table)
            .where(
                answers_table.c.author_id == author_id,
                answers_table.c.is_active.is_(True),
            )
            .order_by(desc(answers_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return await self._to_models(list(result.mappings().all()))

    async def count_by_author(self, author_id: UserId) -> int:
        """Count a user's active answers."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(
                answers_table.c.author_id == author_id,
                answers_table.c.is_active.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update), including its vote ledger."""
        with logfire.span("answer_repository.save", answer_id=str(answer.id)):
            answer_dict = answer_to_dict(answer)

            exists_stmt = select(answers_table.c.id).where(
                answers_table.c.id == answer.id
            )
            existing = (await self.session.execute(exists_stmt)).first()

            if existing:
                stmt = (
                    answers_table.update()
                    .where(answers_table.c.id == answer.id)
                    .values(**answer_dict)
                )
            else:
                logfire.info("Inserting new answer", answer_id=str(answer.id))
                stmt = answers_table.insert().values(**answer_dict)
            await self.session.execute(stmt)

            await self.votes.replace(answer.id, answer.votes)

            await self.session.flush()
            return answer
