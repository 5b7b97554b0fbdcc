"""Unit tests for directory.repositories.user_repository module."""

import pytest

from directory.exceptions import NotFoundError
from directory.models import User, UserFollow
from directory.repositories import UserRepository
from tests.factories import build_user_record


@pytest.mark.django_db
class TestUserRepository:
    """Tests for UserRepository against the test database."""

    @pytest.fixture
    def repository(self):
        """Create repository."""
        return UserRepository()

    @pytest.fixture
    def ana(self, repository):
        """Persist Ana."""
        return repository.save(
            build_user_record(name="Ana", email="ana@x.com", password="p1")
        )

    @pytest.fixture
    def bob(self, repository):
        """Persist Bob."""
        return repository.save(
            build_user_record(name="Bob", email="bob@x.com", password="p2")
        )

    def test_save_assigns_id_on_first_save(self, repository):
        """Test that a new record gets an id and is stored."""
        record = repository.save(build_user_record(name="Ana", email="ana@x.com"))

        assert record.id is not None
        assert User.objects.filter(id=record.id, email="ana@x.com").exists()

    def test_save_updates_existing_row(self, repository, ana):
        """Test that saving a record with an id updates it in place."""
        ana.name = "Ana Maria"
        ana.profile_image = "img.png"

        repository.save(ana)

        user = User.objects.get(id=ana.id)
        assert user.name == "Ana Maria"
        assert user.profile_image == "img.png"
        assert User.objects.count() == 1

    def test_save_stores_password_as_given(self, repository):
        """Test that passwords are stored without hashing or trimming."""
        record = repository.save(build_user_record(password=" secret "))

        assert User.objects.get(id=record.id).password == " secret "

    def test_save_persists_followees_in_order(self, repository, ana, bob):
        """Test that followee edges are written in list order."""
        carl = repository.save(build_user_record(name="Carl"))
        ana.followees = [ana, carl, bob]

        saved = repository.save(ana)

        assert [followee.id for followee in saved.followees] == [
            ana.id,
            carl.id,
            bob.id,
        ]
        assert UserFollow.objects.filter(follower_id=ana.id).count() == 3

    def test_save_collapses_duplicate_followees(self, repository, ana, bob):
        """Test that a followee listed twice is stored once."""
        ana.followees = [bob, bob]

        saved = repository.save(ana)

        assert [followee.id for followee in saved.followees] == [bob.id]

    def test_save_removes_dropped_followees(self, repository, ana, bob):
        """Test that followees missing from the record are deleted."""
        ana.followees = [ana, bob]
        ana = repository.save(ana)

        ana.followees = [ana]
        saved = repository.save(ana)

        assert [followee.id for followee in saved.followees] == [ana.id]
        assert not UserFollow.objects.filter(
            follower_id=ana.id, followee_id=bob.id
        ).exists()

    def test_loaded_followees_are_one_level_deep(self, repository, ana, bob):
        """Test that nested followee lists are left empty."""
        bob.followees = [bob]
        repository.save(bob)
        ana.followees = [bob]
        repository.save(ana)

        loaded = repository.find_by_id(ana.id)

        assert loaded.followees[0].email == "bob@x.com"
        assert loaded.followees[0].followees == []

    def test_find_by_email_exact_matches_case_sensitively(self, repository, ana):
        """Test that email lookup is an exact match."""
        assert repository.find_by_email_exact("ana@x.com").id == ana.id
        assert repository.find_by_email_exact("ANA@x.com") is None
        assert repository.find_by_email_exact("ana@x") is None

    def test_find_by_id_missing_returns_none(self, repository):
        """Test that an unknown id returns None."""
        assert repository.find_by_id(999) is None

    def test_search_containing_name_matches_substring(self, repository, ana, bob):
        """Test that the wildcard-wrapped pattern matches substrings."""
        results = repository.search_containing_name("%n%")

        assert [record.id for record in results] == [ana.id]

    def test_search_containing_name_empty_fragment_matches_all(
        self, repository, ana, bob
    ):
        """Test that an empty fragment returns every user."""
        results = repository.search_containing_name("%%")

        assert [record.id for record in results] == [ana.id, bob.id]

    def test_find_all_following_returns_followers(self, repository, ana, bob):
        """Test the reverse query for users following a target."""
        ana.followees = [ana, bob]
        repository.save(ana)
        bob.followees = [bob]
        repository.save(bob)

        followers = repository.find_all_following(bob.id)

        assert [record.id for record in followers] == [ana.id, bob.id]
        assert repository.find_all_following(999) == []

    def test_delete_removes_user_and_its_edges(self, repository, ana, bob):
        """Test that deleting a user cascades to its follow edges."""
        ana.followees = [bob]
        repository.save(ana)

        repository.delete(bob)

        assert repository.find_by_id(bob.id) is None
        assert repository.find_by_id(ana.id).followees == []

    def test_search_containing_name_treats_percent_as_wildcard(
        self, repository, ana, bob
    ):
        """Test that the pattern is matched as a SQL LIKE pattern."""
        repository.save(build_user_record(name="50% off"))

        match_all = repository.search_containing_name("%%%")
        discount = repository.search_containing_name("%50%%")

        assert len(match_all) == 3
        assert [record.name for record in discount] == ["50% off"]

    def test_save_deleted_user_raises_not_found(self, repository, ana, bob):
        """Test that saving a record whose row was deleted does not recreate it."""
        ana.followees = [bob]
        repository.delete(ana)

        with pytest.raises(NotFoundError):
            repository.save(ana)

        assert not User.objects.filter(id=ana.id).exists()
        assert not UserFollow.objects.filter(follower_id=ana.id).exists()
