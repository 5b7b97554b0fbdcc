"""Factory helpers for test data generation."""

from faker import Faker

from directory.schemas.user import UserInput, UserRecord

fake = Faker()


def build_user_input(**overrides) -> UserInput:
    """Build a valid registration input, overriding any field by keyword."""
    data = {
        "name": fake.name(),
        "email": fake.unique.email(),
        "password": fake.password(),
        "profile_image": fake.image_url(),
    }
    data.update(overrides)
    return UserInput(**data)


def build_user_record(user_id: int | None = None, **overrides) -> UserRecord:
    """Build a user record with no followees unless given."""
    data = {
        "id": user_id,
        "name": fake.name(),
        "email": fake.unique.email(),
        "password": fake.password(),
        "profile_image": None,
        "followees": [],
    }
    data.update(overrides)
    return UserRecord(**data)
