"""Like/dislike counters for articles and comments."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from blog_api.models.like import Like, LikeableType
from blog_api.services._shared.base import BaseService
from blog_api.services._shared.errors import NotFoundError, ValidationError
from blog_api.services.likes.dto import LikeableRef, LikeCountsOut, ReactIn, Reaction
from blog_api.uow.sqlalchemy_uow import SQLAlchemyRepositoryContainer

log = logging.getLogger(__name__)


class LikeService(BaseService):
    """
    Read and bump per-entity counters.

    The referenced row must exist; the database has no foreign key for the
    polymorphic pair, so the check happens here.
    """

    @staticmethod
    def parse_ref(likeable_type: str, likeable_id: int) -> LikeableRef:
        """:raises ValidationError: For an unknown likeable type."""
        try:
            return LikeableRef(LikeableType.parse(likeable_type), int(likeable_id))
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

    @staticmethod
    def parse_reaction(raw: str) -> Reaction:
        try:
            return Reaction.parse(raw)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

    def get_counts(self, ref: LikeableRef) -> LikeCountsOut:
        """Counters for ``ref``; zeros when nobody reacted yet."""
        with self.ro_uow() as uow:
            self._ensure_target(uow, ref)
            row = uow.likes.get_for(ref.likeable_type, ref.likeable_id)
            return self._to_out(ref, row)

    def react(self, dto: ReactIn) -> LikeCountsOut:
        """
        Increment the reaction's counter with a single ``UPDATE``; the row is
        created on first use.
        """
        ref, counter = dto.target, dto.reaction.value
        try:
            with self.rw_uow() as uow:
                self._ensure_target(uow, ref)
                if not uow.likes.increment(ref.likeable_type, ref.likeable_id, counter):
                    uow.likes.add(
                        Like(
                            likeable_type=ref.likeable_type.value,
                            likeable_id=ref.likeable_id,
                            **{"likes": 0, "dislikes": 0, counter: 1},
                        )
                    )
        except IntegrityError:
            # A concurrent first reaction created the row; bump it instead.
            with self.rw_uow() as uow:
                uow.likes.increment(ref.likeable_type, ref.likeable_id, counter)

        log.info(
            "like.reacted type=%s id=%s counter=%s",
            ref.likeable_type.value,
            ref.likeable_id,
            counter,
        )
        return self.get_counts(ref)

    # --------------------------------------------------------------------- #
    # Helpers
    # --------------------------------------------------------------------- #

    @staticmethod
    def _ensure_target(uow: SQLAlchemyRepositoryContainer, ref: LikeableRef) -> None:
        repo = uow.articles if ref.likeable_type is LikeableType.ARTICLE else uow.comments
        if not repo.exists(id=ref.likeable_id):
            raise NotFoundError(ref.likeable_type.value, ref.likeable_id)

    @staticmethod
    def _to_out(ref: LikeableRef, row: Like | None) -> LikeCountsOut:
        return LikeCountsOut(
            likeable_type=ref.likeable_type.value,
            likeable_id=ref.likeable_id,
            likes=row.likes if row is not None else 0,
            dislikes=row.dislikes if row is not None else 0,
        )
