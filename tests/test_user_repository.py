"""
Tests for UserRepository
"""

import pytest

from sentiment_board.db.errors import CapacityExceededError, NotFoundError, OutOfRangeError
from sentiment_board.db.models.users import User
from sentiment_board.db.repositories.users import UserRepository
from sentiment_board.db.session import init_stores


@pytest.fixture
def populated(user_repo):
    for name in ("Alice", "bob", "alicia"):
        user_repo.create_user(User(username=name, password="pw-" + name))
    return user_repo


class TestCreate:
    """Create assigns generator ids"""

    def test_ids_increase(self, user_repo):
        """Each new user gets the next id"""
        a = user_repo.create_user(User(username="a", password="x"))
        b = user_repo.create_user(User(username="b", password="y"))
        assert (a.id, b.id) == (1, 2)
        assert user_repo.count() == 2

    def test_no_uniqueness_enforced(self, user_repo):
        """Duplicates are the caller's job to prevent"""
        user_repo.create_user(User(username="a"))
        user_repo.create_user(User(username="a"))
        assert user_repo.count() == 2

    def test_ids_not_reused_after_delete(self, user_repo):
        """Deleting the last user does not free its id"""
        user_repo.create_user(User(username="a"))
        user_repo.delete_at(0)
        assert user_repo.create_user(User(username="b")).id == 2

    def test_capacity_exceeded(self):
        """A full store raises and does not consume an id"""
        stores = init_stores(capacity=1)
        repo = UserRepository(stores.users, stores.user_ids)
        repo.create_user(User(username="a"))
        with pytest.raises(CapacityExceededError):
            repo.create_user(User(username="b"))
        assert stores.user_ids.current == 1


class TestLookup:
    """Username lookup and existence checks"""

    def test_find_by_username_is_exact(self, populated):
        """Case-sensitive exact match"""
        assert populated.get_by_username("bob").password == "pw-bob"
        with pytest.raises(NotFoundError):
            populated.get_by_username("BOB")

    def test_find_first_match_wins(self, user_repo):
        """With duplicates, the earliest record is returned"""
        user_repo.create_user(User(username="dup", password="first"))
        user_repo.create_user(User(username="dup", password="second"))
        assert user_repo.get_by_username("dup").password == "first"

    def test_not_found_is_lookup_error(self, user_repo):
        """NotFoundError can be caught as LookupError"""
        with pytest.raises(LookupError):
            user_repo.get_by_username("ghost")

    def test_exists_against_all(self, populated):
        """-1 checks every live record"""
        assert populated.exists("bob")
        assert populated.exists("bob", -1)
        assert not populated.exists("carol")

    def test_exists_skips_own_position(self, populated):
        """A user may keep their own username during edit"""
        assert not populated.exists("bob", 1)
        assert populated.exists("bob", 0)

    def test_get_by_id(self, populated):
        """Generator ids stay attached to their user after compaction"""
        populated.delete_at(0)
        assert populated.get(2).username == "bob"
        assert populated.position_of(2) == 0
        with pytest.raises(NotFoundError):
            populated.get(1)


class TestSearch:
    """Sparse, case-insensitive substring search"""

    def test_matches_keep_original_positions(self, populated):
        """Positions of non-matching records are absent"""
        result = populated.search_by_username("ALI")
        assert sorted(result) == [0, 2]
        assert 1 not in result
        assert [u.username for u in result.values()] == ["Alice", "alicia"]

    def test_empty_needle_matches_all(self, populated):
        """An empty search returns every live record"""
        assert sorted(populated.search_by_username("")) == [0, 1, 2]

    def test_no_match(self, populated):
        """Nothing matches -> empty mapping"""
        assert populated.search_by_username("zzz") == {}

    def test_results_are_copies(self, populated):
        """Editing a search hit does not change the store"""
        hit = populated.search_by_username("bob")[1]
        hit.username = "mallory"
        assert populated.get_at(1).username == "bob"


class TestEditDelete:
    """Positional edit and delete"""

    def test_partial_edit_only_changes_non_empty_fields(self, populated):
        """Empty username leaves the username untouched"""
        populated.edit_at(1, User(username="", password="x"))
        user = populated.get_at(1)
        assert user.username == "bob"
        assert user.password == "x"

    def test_edit_username(self, populated):
        """Non-empty username overwrites, id unchanged"""
        updated = populated.edit_at(0, User(username="Alicia2"))
        assert updated.username == "Alicia2"
        assert updated.password == "pw-Alice"
        assert updated.id == 1

    def test_edit_out_of_range(self, populated):
        """Invalid positions are rejected"""
        with pytest.raises(OutOfRangeError):
            populated.edit_at(3, User(username="x"))
        with pytest.raises(OutOfRangeError):
            populated.edit_at(-1, User(username="x"))

    def test_delete_compacts(self, populated):
        """Deleting the middle user shifts the next one forward"""
        populated.delete_at(1)
        assert [u.username for u in populated.list()] == ["Alice", "alicia"]
        assert populated.count() == 2

    def test_delete_out_of_range(self, populated):
        """Invalid positions are rejected and nothing is removed"""
        with pytest.raises(OutOfRangeError):
            populated.delete_at(3)
        assert populated.count() == 3
