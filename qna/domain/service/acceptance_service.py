"""Answer acceptance domain service."""

import logfire

from qna.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from qna.domain.model import Answer
from qna.domain.model.common import utc_now
from qna.domain.repository import AnswerRepository, QuestionRepository
from qna.domain.value import AnswerId, NotificationType, UserId

from .base import Service
from .notification_service import NotificationService


class AcceptanceService(Service):
    """Domain service for accepting the best answer to a question.

    A question has at most one accepted answer. Accepting a different
    answer clears the previous one first.
    """

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        notification_service: NotificationService,
    ) -> None:
        """Initialize acceptance service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
            notification_service: Notification domain service
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository
        self.notification_service = notification_service

    async def accept_answer(self, answer_id: AnswerId, actor_id: UserId) -> Answer:
        """Mark an answer as the accepted answer of its question.

        Checks run in order: existence, authorship, then question state.
        Accepting the answer that is already accepted changes nothing and
        sends no notification.

        Args:
            answer_id: Answer to accept
            actor_id: User performing the action (must be the question author)

        Returns:
            The accepted answer

        Raises:
            NotFoundError: If the answer or its question is missing or
                soft-deleted
            NotAuthorizedError: If the actor did not ask the question
            BusinessRuleViolationError: If the question is closed
        """
        with logfire.span(
            "acceptance_service.accept_answer",
            answer_id=str(answer_id),
            user_id=str(actor_id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer or not answer.is_active:
                logfire.warn("Accept of missing answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            question = await self.question_repository.find_by_id(answer.question_id)
            if not question or not question.is_active:
                logfire.warn(
                    "Accept on missing question", question_id=str(answer.question_id)
                )
                raise NotFoundError("Question", str(answer.question_id))
            if answer.id not in question.answer_ids:
                logfire.warn(
                    "Answer not attached to its question",
                    answer_id=str(answer_id),
                    question_id=str(question.id),
                )
                raise NotFoundError("Answer", str(answer_id))

            if question.author_id != actor_id:
                logfire.warn(
                    "Unauthorized accept attempt",
                    answer_id=str(answer_id),
                    user_id=str(actor_id),
                )
                raise NotAuthorizedError("Only the question author can accept answers")

            if question.is_closed:
                raise BusinessRuleViolationError(
                    "Cannot accept answers on a closed question"
                )

            if question.accepted_answer_id == answer.id and answer.is_accepted:
                logfire.info("Answer already accepted", answer_id=str(answer_id))
                return answer

            now = utc_now()

            previous_id = question.accepted_answer_id
            if previous_id is not None and previous_id != answer.id:
                previous = await self.answer_repository.find_by_id(previous_id)
                if previous:
                    await self.answer_repository.save(
                        previous.model_copy(
                            update={
                                "is_accepted": False,
                                "accepted_at": None,
                                "updated_at": now,
                            }
                        )
                    )
                    logfire.info(
                        "Previous accepted answer cleared", answer_id=str(previous_id)
                    )

            accepted = await self.answer_repository.save(
                answer.model_copy(
                    update={"is_accepted": True, "accepted_at": now, "updated_at": now}
                )
            )
            await self.question_repository.save(
                question.model_copy(
                    update={"accepted_answer_id": accepted.id, "updated_at": now}
                )
            )
            logfire.info(
                "Answer accepted",
                answer_id=str(answer_id),
                question_id=str(question.id),
            )

            if accepted.author_id != actor_id:
                await self.notification_service.notify(
                    recipient_id=accepted.author_id,
                    sender_id=actor_id,
                    type=NotificationType.ACCEPTED_ANSWER,
                    message=f"Your answer was accepted for: {question.title}",
                    related_question_id=question.id,
                    related_answer_id=accepted.id,
                )

            return accepted
