"""Vote ledger storage shared by the question and answer repositories.

Each ledger entry is one row in the votes table. Saving a content item
replaces its rows wholesale (last write wins across requests).
"""

from typing import Dict, List
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.selectable import ScalarSelect

from qna.domain.model import VoteLedger
from qna.domain.value import VotableType, VoteType
from qna.persistence.mappers import ledger_to_rows, rows_to_ledgers
from qna.persistence.tables import votes_table


class VoteLedgerStore:
    """Reads and writes vote ledgers for one votable type."""

    def __init__(self, session: AsyncSession, votable_type: VotableType) -> None:
        """Initialize store.

        Args:
            session: SQLAlchemy async session
            votable_type: Kind of item whose ledgers this store manages
        """
        self.session = session
        self.votable_type = votable_type

    async def load(self, votable_ids: List[UUID]) -> Dict[UUID, VoteLedger]:
        """Load ledgers for several items in a single query.

        Args:
            votable_ids: Item IDs

        Returns:
            Dict mapping item ID -> ledger (items without votes are absent)
        """
        if not votable_ids:
            return {}

        stmt = (
            select(
                votes_table.c.votable_id,
                votes_table.c.user_id,
                votes_table.c.vote_type,
                votes_table.c.created_at,
            )
            .where(
                votes_table.c.votable_type == self.votable_type.value,
                votes_table.c.votable_id.in_(votable_ids),
            )
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return rows_to_ledgers(dict(row) for row in result.mappings().all())

    async def replace(self, votable_id: UUID, ledger: VoteLedger) -> None:
        """Replace the stored ledger of an item.

        Args:
            votable_id: Item ID
            ledger: Ledger to store
        """
        with logfire.span(
            "vote_ledger_store.replace",
            votable_type=self.votable_type.value,
            votable_id=str(votable_id),
            upvotes=len(ledger.upvotes),
            downvotes=len(ledger.downvotes),
        ):
            await self.session.execute(
                delete(votes_table).where(
                    votes_table.c.votable_type == self.votable_type.value,
                    votes_table.c.votable_id == votable_id,
                )
            )
            rows = ledger_to_rows(self.votable_type, votable_id, ledger)
            if rows:
                await self.session.execute(insert(votes_table), rows)

    def count_subquery(
        self, votable_id_column: ColumnElement, vote_type: VoteType
    ) -> ScalarSelect:
        """Correlated subquery counting one side of an item's ledger.

        Args:
            votable_id_column: Column holding the item ID in the outer query
            vote_type: Which side of the ledger to count

        Returns:
            Scalar subquery usable in ORDER BY
        """
        return (
            select(func.count())
            .select_from(votes_table)
            .where(
                and_(
                    votes_table.c.votable_type == self.votable_type.value,
                    votes_table.c.votable_id == votable_id_column,
                    votes_table.c.vote_type == vote_type.value,
                )
            )
            .scalar_subquery()
        )
