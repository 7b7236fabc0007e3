"""Answer domain service."""

from uuid import uuid4

import logfire

from qna.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from qna.domain.model import Answer, User
from qna.domain.model.common import utc_now
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.validation import validate_answer
from qna.domain.value import AnswerId, NotificationType, QuestionId

from .base import Service
from .notification_service import NotificationService


class AnswerService(Service):
    """Domain service for the answer lifecycle."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            notification_service: Notification domain service
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.notification_service = notification_service

    async def get_active_answer(self, answer_id: AnswerId) -> Answer:
        """Get an active answer by ID.

        Raises:
            NotFoundError: If the answer is missing or soft-deleted
        """
        answer = await self.answer_repository.find_by_id(answer_id)
        if not answer or not answer.is_active:
            logfire.warn("Answer not found", answer_id=str(answer_id))
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def create_answer(
        self, author: User, question_id: QuestionId, content: str
    ) -> Answer:
        """Post an answer to a question.

        Appends the answer to the question's answer list and notifies the
        question author, unless they answered their own question.

        Args:
            author: Answering user
            question_id: Question being answered
            content: Answer body

        Returns:
            The created answer

        Raises:
            ValidationError: If the content is too short
            NotFoundError: If the question is missing or soft-deleted
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            author_id=str(author.id),
        ):
            errors = validate_answer(content)
            if errors:
                raise ValidationError(errors)

            question = await self.question_repository.find_by_id(question_id)
            if not question or not question.is_active:
                logfire.warn("Answer to missing question", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                author_id=author.id,
                content=content,
            )
            saved = await self.answer_repository.save(answer)

            await self.question_repository.save(
                question.model_copy(
                    update={"answer_ids": [*question.answer_ids, saved.id]}
                )
            )
            logfire.info(
                "Answer created", answer_id=str(saved.id), question_id=str(question_id)
            )

            if question.author_id != author.id:
                await self.notification_service.notify(
                    recipient_id=question.author_id,
                    sender_id=author.id,
                    type=NotificationType.ANSWER,
                    message=f"{author.username} answered your question: {question.title}",
                    related_question_id=question.id,
                    related_answer_id=saved.id,
                )

            return saved

    async def delete_answer(self, answer_id: AnswerId, actor: User) -> None:
        """Soft-delete an answer and pull it from its question's answer list.

        The answer record stays fetchable by ID.

        Args:
            answer_id: Answer ID
            actor: User performing the action (author or admin)

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the actor is neither author nor admin
        """
        with logfire.span(
            "answer_service.delete_answer",
            answer_id=str(answer_id),
            user_id=str(actor.id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            if answer.author_id != actor.id and not actor.is_admin:
                logfire.warn(
                    "Unauthorized answer deletion attempt",
                    answer_id=str(answer_id),
                    user_id=str(actor.id),
                )
                raise NotAuthorizedError("Not authorized to delete this answer")

            await self.answer_repository.save(
                answer.model_copy(update={"is_active": False, "updated_at": utc_now()})
            )

            question = await self.question_repository.find_by_id(answer.question_id)
            if question and answer_id in question.answer_ids:
                await self.question_repository.save(
                    question.model_copy(
                        update={
                            "answer_ids": [
                                a for a in question.answer_ids if a != answer_id
                            ]
                        }
                    )
                )

            logfire.info("Answer deleted", answer_id=str(answer_id))
