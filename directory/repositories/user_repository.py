"""Repository for user and follow-graph database queries."""

from django.db import transaction

from directory.exceptions import NotFoundError
from directory.models import User, UserFollow
from directory.schemas.user import UserRecord


class UserRepository:
    """Django ORM implementation of the ``UserStore`` contract.

    Converts between ``User`` rows and ``UserRecord`` schemas. A user's
    followees are the ``UserFollow`` rows it owns as follower, in insertion
    order.
    """

    def find_by_email_exact(self, email: str) -> UserRecord | None:
        """Look up a user by exact email match.

        Args:
            email: Email address to match

        Returns:
            The matching user record, or None if no user has that email

        Example:
            >>> record = UserRepository().find_by_email_exact("ana@example.com")
            >>> record.name if record else None
            'Ana'
        """
        user = User.objects.filter(email=email).first()
        return self._to_record(user) if user else None

    def find_by_id(self, user_id: int) -> UserRecord | None:
        """Look up a user by primary key.

        Args:
            user_id: ID of the user

        Returns:
            The user record, or None if it does not exist
        """
        user = User.objects.filter(id=user_id).first()
        return self._to_record(user) if user else None

    def save(self, record: UserRecord) -> UserRecord:
        """Insert or update a user and rewrite its followee edges.

        Edges already stored keep their position; followees missing from the
        database are appended in list order, and stored edges absent from
        ``record.followees`` are removed.

        Args:
            record: User record to persist

        Returns:
            The persisted record, with ``id`` assigned on first save

        Raises:
            NotFoundError: If the record has an id whose row no longer exists
        """
        with transaction.atomic():
            if record.id is None:
                user = User()
            else:
                user = User.objects.select_for_update().filter(id=record.id).first()
                if user is None:
                    raise NotFoundError(record.id)

            user.name = record.name
            user.email = record.email
            user.password = record.password
            user.profile_image = record.profile_image
            user.save()

            self._sync_followees(user, record.followees)

        return self._to_record(user)

    def delete(self, record: UserRecord) -> None:
        """Delete a user.

        Follow edges pointing to or from the user are removed by the
        database cascade on ``UserFollow``.
        """
        User.objects.filter(id=record.id).delete()

    def search_containing_name(self, pattern: str) -> list[UserRecord]:
        """Return users whose name matches a SQL ``LIKE`` pattern.

        Wildcards inside the fragment are kept, so ``"%%%"`` matches every
        user and ``"%50%%"`` matches names containing ``50``.

        Args:
            pattern: Substring wrapped in ``%`` wildcards, e.g. ``"%ana%"``

        Returns:
            Matching user records ordered by id
        """
        users = User.objects.filter(name__like=pattern).order_by("id")
        return [self._to_record(user) for user in users]

    def find_all_following(self, target_id: int) -> list[UserRecord]:
        """Return users that follow ``target_id``, ordered by id."""
        users = User.objects.filter(followees__id=target_id).order_by("id")
        return [self._to_record(user) for user in users]

    def _sync_followees(self, user: User, followees: list[UserRecord]) -> None:
        desired: list[int] = []
        for followee in followees:
            if followee.id is not None and followee.id not in desired:
                desired.append(followee.id)

        existing = set(
            UserFollow.objects.filter(follower=user).values_list(
                "followee_id", flat=True
            )
        )

        stale = existing.difference(desired)
        if stale:
            UserFollow.objects.filter(follower=user, followee_id__in=stale).delete()

        UserFollow.objects.bulk_create(
            [
                UserFollow(follower=user, followee_id=followee_id)
                for followee_id in desired
                if followee_id not in existing
            ]
        )

    def _to_record(self, user: User, with_followees: bool = True) -> UserRecord:
        followees = []
        if with_followees:
            links = (
                UserFollow.objects.filter(follower=user)
                .select_related("followee")
                .order_by("id")
            )
            followees = [
                self._to_record(link.followee, with_followees=False) for link in links
            ]

        return UserRecord(
            id=user.id,
            name=user.name,
            email=user.email,
            password=user.password,
            profile_image=user.profile_image,
            followees=followees,
        )
