"""Service for user accounts and the follow graph."""

import structlog

from directory.constants import LIKE_WILDCARD
from directory.exceptions import NotFoundError, ValidationFailedError
from directory.repositories import UserStore
from directory.schemas.user import UserInput, UserRecord, UserView

logger = structlog.get_logger(__name__)


class UserDirectoryService:
    """Service for registering, editing and following users.

    All persistence goes through the injected ``UserStore``. Follow edges
    live in the acting user's ``followees`` list; followers are found by a
    reverse query on the store.

    Every registered user follows itself. That edge is never removed by
    ``unfollow`` and is filtered out of the follower/followee listings.
    """

    def __init__(self, store: UserStore):
        """Initialize the service.

        Args:
            store: Persistence backend for user records
        """
        self.store = store

    def set_store(self, store: UserStore) -> None:
        """Replace the persistence backend."""
        self.store = store

    def find_by_email(self, email: str) -> UserRecord:
        """Find a user by exact email.

        Raises:
            ValidationFailedError: If no user has that email.
        """
        user = self.store.find_by_email_exact(email)
        if user is None:
            logger.warning("User not found by email", email=email)
            raise ValidationFailedError(f"No user found with email: {email}")
        return user

    def find_by_id(self, user_id: int) -> UserRecord:
        """Find a user by id.

        Raises:
            NotFoundError: If no user has that id.
        """
        user = self.store.find_by_id(user_id)
        if user is None:
            logger.warning("User not found by id", user_id=user_id)
            raise NotFoundError(user_id)
        return user

    def get_user_view(self, user_id: int) -> UserView:
        """Return the view of a user, including its password."""
        return UserView.from_record(self.find_by_id(user_id))

    def register(self, user_input: UserInput | None) -> int:
        """Register a new user and make it follow itself.

        Args:
            user_input: Name, email, password and optional profile image.

        Returns:
            The id assigned to the new user.

        Raises:
            ValidationFailedError: If a required field is blank, the email has
                no ``@``, or the email is already registered.
        """
        self._validate(user_input)

        record = UserRecord(
            name=user_input.name,
            email=user_input.email,
            password=user_input.password,
            profile_image=user_input.profile_image,
        )
        record = self.store.save(record)
        logger.info("User registered", user_id=record.id, email=record.email)

        self.follow(record.id, record.email)
        return record.id

    def edit(self, user_id: int, user_input: UserInput) -> None:
        """Overwrite a user's name, password, email and profile image.

        The new email is not checked for format or uniqueness, and blank
        values are stored as given. Only missing name, email or password
        values are rejected.

        Raises:
            NotFoundError: If the user does not exist.
            ValidationFailedError: If name, email or password is missing.
        """
        record = self.find_by_id(user_id)
        for field in ("name", "email", "password"):
            if getattr(user_input, field) is None:
                raise ValidationFailedError(f"{field.capitalize()} is required")

        record.name = user_input.name
        record.password = user_input.password
        record.email = user_input.email
        record.profile_image = user_input.profile_image
        self.store.save(record)
        logger.info("User edited", user_id=user_id)

    def delete(self, user_id: int) -> None:
        """Delete a user.

        Other users' followee lists are not touched here.
        """
        record = self.find_by_id(user_id)
        self.store.delete(record)
        logger.info("User deleted", user_id=user_id)

    def search_by_name(self, fragment: str) -> list[UserView]:
        """Return views of all users whose name contains ``fragment``."""
        users = self.store.search_containing_name(
            f"{LIKE_WILDCARD}{fragment}{LIKE_WILDCARD}"
        )
        if users is None:
            users = []
        return [UserView.from_record(user) for user in users]

    def follow(self, target_id: int, acting_user_email: str) -> None:
        """Make the acting user follow the target user.

        Following a user that is already followed does nothing.

        Raises:
            NotFoundError: If the target does not exist.
            ValidationFailedError: If the acting user does not exist.
        """
        target = self.find_by_id(target_id)
        actor = self.find_by_email(acting_user_email)

        if actor.follows(target.id):
            logger.debug(
                "Follow skipped, already following",
                user_id=actor.id,
                target_id=target.id,
            )
            return

        actor.followees.append(target)
        self.store.save(actor)
        logger.info("User followed", user_id=actor.id, target_id=target.id)

    def unfollow(self, target_id: int, acting_user_email: str) -> None:
        """Make the acting user stop following the target user.

        Does nothing when the actor does not follow the target, or when the
        target is the actor itself.

        Raises:
            NotFoundError: If the target does not exist.
            ValidationFailedError: If the acting user does not exist.
        """
        target = self.find_by_id(target_id)
        actor = self.find_by_email(acting_user_email)

        if not actor.follows(target.id) or target.same_user(actor):
            logger.debug(
                "Unfollow skipped",
                user_id=actor.id,
                target_id=target.id,
            )
            return

        actor.followees = [
            followee for followee in actor.followees if followee.id != target.id
        ]
        self.store.save(actor)
        logger.info("User unfollowed", user_id=actor.id, target_id=target.id)

    def list_followees(self, email: str) -> list[UserView]:
        """Return views of the users the given user follows, excluding itself."""
        user = self.find_by_email(email)
        views = [UserView.from_record(followee) for followee in user.followees]
        return _exclude_email(views, email)

    def list_followers(self, email: str) -> list[UserView]:
        """Return views of the users following the given user, excluding itself."""
        user = self.find_by_email(email)
        followers = self.store.find_all_following(user.id)
        if not followers:
            return []
        views = [UserView.from_record(follower) for follower in followers]
        return _exclude_email(views, email)

    def _validate(self, user_input: UserInput | None) -> None:
        if user_input is None:
            raise ValidationFailedError("User input is required")

        if _is_blank(user_input.name):
            raise ValidationFailedError("Name is required")

        if _is_blank(user_input.email):
            raise ValidationFailedError("Email is required")

        if _is_blank(user_input.password):
            raise ValidationFailedError("Password is required")

        if "@" not in user_input.email:
            raise ValidationFailedError("Email is invalid")

        if self.store.find_by_email_exact(user_input.email) is not None:
            raise ValidationFailedError(
                f"Email already registered: {user_input.email}"
            )


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _exclude_email(views: list[UserView], email: str) -> list[UserView]:
    return [view for view in views if view.email.casefold() != email.casefold()]
