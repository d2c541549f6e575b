"""
Shared fixtures: fresh in-memory stores for every test.
"""

import bcrypt
import pytest

from sentiment_board.cli.dependencies import build_container
from sentiment_board.core.config import Settings
from sentiment_board.db.models.comments import Comment
from sentiment_board.db.repositories.comments import CommentRepository
from sentiment_board.db.repositories.users import UserRepository
from sentiment_board.db.session import init_stores

_real_gensalt = bcrypt.gensalt


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Lowest bcrypt cost so hashing does not dominate the test run"""
    monkeypatch.setattr(bcrypt, "gensalt", lambda: _real_gensalt(rounds=4))


@pytest.fixture
def settings():
    return Settings(_env_file=None, ENV="test", ADMIN_PASS="secret", STORE_CAPACITY=255)


@pytest.fixture
def stores():
    return init_stores()


@pytest.fixture
def user_repo(stores):
    return UserRepository(stores.users, stores.user_ids)


@pytest.fixture
def comment_repo(stores):
    return CommentRepository(stores.comments, stores.comment_ids)


@pytest.fixture
def container(settings):
    return build_container(settings)


@pytest.fixture
def make_comments(comment_repo):
    """Create comments from (text, category[, owner]) tuples, in order"""

    def _make(*rows):
        created = []
        for row in rows:
            text, category = row[0], row[1]
            owner = row[2] if len(row) > 2 else 1
            created.append(comment_repo.create_comment(Comment(text=text, category=category), owner))
        return created

    return _make
