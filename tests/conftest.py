"""Test configuration and fixtures for the blogstream application."""

from datetime import datetime, timedelta, timezone
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.pool import StaticPool

from blogstream import create_app
from blogstream.extensions import db
from blogstream.models import User, Post, PostDisplayType, PostImage, Tag


@pytest.fixture
def app() -> Generator[Flask, None, None]:
    """Create and configure a test Flask application."""
    # Use in-memory SQLite for each test
    test_config = {
        'TESTING': True,
        'WTF_CSRF_ENABLED': False,
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'SQLALCHEMY_ENGINE_OPTIONS': {
            'poolclass': StaticPool,
            'connect_args': {'check_same_thread': False}
        },
        'SECRET_KEY': 'test-secret-key',
        'SESSION_COOKIE_SECURE': False,
        'BASE_URL': 'http://blog.test',
        'POST_PAGING_SIZE': 3,
        'TITLE_PAGING_SIZE': 5,
        'TAG_CLOUD_COUNT': 50,
        'RATELIMIT_ENABLED': False,
        'CACHE_TYPE': 'NullCache',
    }

    app = create_app(test_config)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def runner(app: Flask):
    """Create a test CLI runner."""
    return app.test_cli_runner()


@pytest.fixture
def test_user(app: Flask) -> User:
    """A post author. The password hash is a placeholder; no test logs in with it."""
    user = User(
        username='author',
        email='author@example.com',
        password_hash='not-a-real-hash',
        created_at=datetime.now(timezone.utc),
    )
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def other_user(app: Flask) -> User:
    user = User(
        username='reader',
        email='reader@example.com',
        password_hash='not-a-real-hash',
        created_at=datetime.now(timezone.utc),
    )
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def make_tag(app: Flask):
    def _make(value: str) -> Tag:
        tag = Tag(value=value)
        db.session.add(tag)
        db.session.commit()
        return tag

    return _make


@pytest.fixture
def make_post(app: Flask, test_user: User):
    """Factory for posts; each call is dated one hour after the previous one."""
    base = datetime(2024, 1, 1, 12, 0, 0)
    counter = {'n': 0}

    def _make(
        title: str | None = None,
        *,
        tags: list[Tag] | None = None,
        published: bool = True,
        display_type: PostDisplayType = PostDisplayType.POST,
        author: User | None = None,
        content: str = '<p>Body text</p>',
        link: str | None = None,
    ) -> Post:
        counter['n'] += 1
        n = counter['n']
        post = Post(
            user_id=(author or test_user).id,
            title=title or f'Post {n}',
            slug=f'post-{n}',
            content=content,
            link=link,
            display_type=display_type,
            is_published=published,
            post_date=base + timedelta(hours=n),
        )
        if tags:
            post.tags = list(tags)
        db.session.add(post)
        db.session.commit()
        return post

    return _make


@pytest.fixture
def gallery_post(make_post) -> Post:
    post = make_post('Gallery', display_type=PostDisplayType.MULTIPHOTO_POST)
    for order, name in enumerate(['second.jpg', 'first.jpg']):
        db.session.add(PostImage(post_id=post.id, url=f'/static/{name}', display_order=1 - order))
    db.session.commit()
    return post


@pytest.fixture
def authenticated_client(client: FlaskClient, other_user: User) -> FlaskClient:
    """Create a client with an authenticated user session."""
    with client.session_transaction() as sess:
        sess['_user_id'] = str(other_user.id)
        sess['_fresh'] = True
    return client


@pytest.fixture
def author_client(client: FlaskClient, test_user: User) -> FlaskClient:
    """A client signed in as the author of `make_post` posts."""
    with client.session_transaction() as sess:
        sess['_user_id'] = str(test_user.id)
        sess['_fresh'] = True
    return client
