"""Question domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from qna.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from qna.domain.model import Question, User
from qna.domain.model.common import utc_now
from qna.domain.repository import QuestionRepository
from qna.domain.validation import normalize_tags, validate_question
from qna.domain.value import QuestionId, TagName, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for the question lifecycle."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def get_active_question(self, question_id: QuestionId) -> Question:
        """Get an active question by ID.

        Args:
            question_id: Question ID

        Returns:
            The question

        Raises:
            NotFoundError: If the question is missing or soft-deleted
        """
        with logfire.span(
            "question_service.get_active_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question or not question.is_active:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        description: str,
        tags: list[str],
    ) -> Question:
        """Create a new question.

        Args:
            author_id: Author's user ID
            title: Title (trimmed before storing)
            description: Body text
            tags: Raw tags (trimmed, lowercased and de-duplicated)

        Returns:
            The created question

        Raises:
            ValidationError: If any field is invalid
        """
        with logfire.span("question_service.create_question", author_id=str(author_id)):
            errors = validate_question(title, description, tags)
            if errors:
                logfire.info(
                    "Question rejected by validation",
                    fields=[e.field for e in errors],
                )
                raise ValidationError(errors)

            question = Question(
                id=QuestionId(uuid4()),
                title=title.strip(),
                description=description,
                tags=[TagName(tag) for tag in normalize_tags(tags)],
                author_id=author_id,
            )
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created",
                question_id=str(saved.id),
                tags=[t.root for t in saved.tags],
            )
            return saved

    async def record_view(
        self, question: Question, viewer_id: Optional[UserId]
    ) -> Question:
        """Count a read of the question.

        Reads by the author are not counted; anonymous reads are.

        Args:
            question: The question being read
            viewer_id: Reader's user ID, or None if anonymous

        Returns:
            The question with its view count as of this read
        """
        if viewer_id is not None and viewer_id == question.author_id:
            return question

        await self.question_repository.increment_views(question.id)
        logfire.debug("Question view recorded", question_id=str(question.id))
        return question.model_copy(update={"views": question.views + 1})

    def _check_can_moderate(self, question: Question, actor: User, action: str) -> None:
        if question.author_id != actor.id and not actor.is_admin:
            logfire.warn(
                "Unauthorized question moderation attempt",
                question_id=str(question.id),
                user_id=str(actor.id),
                action=action,
            )
            raise NotAuthorizedError(f"Not authorized to {action} this question")

    async def close_question(self, question_id: QuestionId, actor: User) -> Question:
        """Close a question to further answer acceptance.

        Closing an already closed question is a no-op.

        Args:
            question_id: Question ID
            actor: User performing the action (author or admin)

        Returns:
            The closed question

        Raises:
            NotFoundError: If the question is missing or soft-deleted
            NotAuthorizedError: If the actor is neither author nor admin
        """
        with logfire.span(
            "question_service.close_question",
            question_id=str(question_id),
            user_id=str(actor.id),
        ):
            question = await self.get_active_question(question_id)
            self._check_can_moderate(question, actor, "close")

            if question.is_closed:
                return question

            now = utc_now()
            closed = question.model_copy(
                update={
                    "is_closed": True,
                    "closed_at": now,
                    "closed_by": actor.id,
                    "updated_at": now,
                }
            )
            saved = await self.question_repository.save(closed)
            logfire.info("Question closed", question_id=str(question_id))
            return saved

    async def delete_question(self, question_id: QuestionId, actor: User) -> None:
        """Soft-delete a question.

        The question disappears from listings but stays fetchable by ID
        through the repository.

        Args:
            question_id: Question ID
            actor: User performing the action (author or admin)

        Raises:
            NotFoundError: If the question is missing or already deleted
            NotAuthorizedError: If the actor is neither author nor admin
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            user_id=str(actor.id),
        ):
            question = await self.get_active_question(question_id)
            self._check_can_moderate(question, actor, "delete")

            deleted = question.model_copy(
                update={"is_active": False, "updated_at": utc_now()}
            )
            await self.question_repository.save(deleted)
            logfire.info("Question deleted", question_id=str(question_id))
