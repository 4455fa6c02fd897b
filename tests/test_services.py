"""Tests for service layer functions."""

from datetime import datetime
from types import SimpleNamespace

import pytest

from blogstream import create_app
from blogstream.extensions import cache
from blogstream.models import PostDisplayType, PostImage
from blogstream.schemas.tags import TagDTO
from blogstream.services import posts as post_svc
from blogstream.services.templating import create_post_html


class TestPostService:
    """Test cases for the post service."""

    def test_get_published_posts(self, app, make_post):
        posts = [make_post() for _ in range(4)]
        page = post_svc.get_published_posts(1, 3)
        assert [p.id for p in page] == [posts[0].id]

    def test_add_post_like_toggles(self, app, make_post, other_user):
        post = make_post()
        assert post_svc.add_post_like(other_user.id, post.id) == 1
        assert post_svc.add_post_like(other_user.id, post.id) == -1
        assert post.likes_count == 0

    def test_add_post_like_unknown_post(self, app, other_user):
        with pytest.raises(post_svc.PostNotFoundError) as exc:
            post_svc.add_post_like(other_user.id, 404)
        assert exc.value.post_id == 404

    def test_get_paged_liked_posts(self, app, make_post, other_user):
        post = make_post()
        post_svc.add_post_like(other_user.id, post.id)
        assert [p.id for p in post_svc.get_paged_liked_posts(other_user.id, 0, 5)] == [post.id]

    def test_get_post_images(self, app, gallery_post):
        assert len(post_svc.get_post_images(gallery_post.id)) == 2


class TestTagService:
    """Test cases for tag listings and the tag cloud selection."""

    def test_tag_dtos(self, app, make_post, make_tag):
        python = make_tag('Python')
        make_post(tags=[python])
        make_post(tags=[python])

        dtos = post_svc.get_tag_dtos()
        assert dtos == [TagDTO(tag_id=python.id, tag_value='Python', tag_count=2)]

    def test_tag_values(self, app, make_tag):
        make_tag('b')
        make_tag('a')
        assert post_svc.get_tag_values() == ['a', 'b']

    def test_tag_cloud_keeps_most_used_alphabetically(self, app, make_post, make_tag):
        app.config['TAG_CLOUD_COUNT'] = 2
        alpha, beta, gamma = make_tag('alpha'), make_tag('beta'), make_tag('gamma')
        make_post(tags=[alpha, gamma])
        make_post(tags=[gamma])
        make_post(tags=[beta, gamma])
        make_post(tags=[beta])

        cloud = post_svc.get_tag_cloud()
        assert [(t.tag_value, t.tag_count) for t in cloud] == [('beta', 2), ('gamma', 3)]

    def test_tag_cloud_empty(self, app):
        assert post_svc.get_tag_cloud() == []


@pytest.fixture
def tag_cache(app):
    """Swap the test NullCache for a real in-process cache."""
    cache.init_app(app, config={'CACHE_TYPE': 'SimpleCache'})
    yield cache
    cache.clear()


class TestTagCache:
    """Test cases for memoized tag reads."""

    def test_tag_dtos_cached_until_invalidated(self, app, tag_cache, make_post, make_tag):
        python = make_tag('Python')
        make_post(tags=[python])
        assert [t.tag_count for t in post_svc.get_tag_dtos()] == [1]

        make_post(tags=[python])
        assert [t.tag_count for t in post_svc.get_tag_dtos()] == [1]

        post_svc.invalidate_tag_cache()
        assert post_svc.get_tag_dtos() == [TagDTO(tag_id=python.id, tag_value='Python', tag_count=2)]

    def test_tag_values_cached_until_invalidated(self, app, tag_cache, make_tag):
        make_tag('b')
        assert post_svc.get_tag_values() == ['b']

        make_tag('a')
        assert post_svc.get_tag_values() == ['b']

        post_svc.invalidate_tag_cache()
        assert post_svc.get_tag_values() == ['a', 'b']

    def test_timeout_comes_from_config(self):
        app = create_app({
            'TESTING': True,
            'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
            'TAG_CACHE_SECONDS': 42,
        })
        assert app.config['TAG_CACHE_SECONDS'] == 42
        assert post_svc.get_tag_dtos.cache_timeout == 42
        assert post_svc.get_tag_values.cache_timeout == 42

    def test_default_timeout(self, app):
        assert app.config['TAG_CACHE_SECONDS'] == 300
        assert post_svc.get_tag_dtos.cache_timeout == 300


class TestTemplateService:
    """Test cases for post fragment rendering."""

    def _post(self, **overrides):
        fields = dict(
            id=7,
            user_id=1,
            title='Fragment <Title>',
            slug='fragment-title',
            link=None,
            content='<p>Hello</p><script>alert(1)</script>',
            display_type=PostDisplayType.POST,
            post_date=datetime(2024, 3, 5, 9, 30),
            likes_count=4,
            tags=[],
        )
        fields.update(overrides)
        return SimpleNamespace(**fields)

    def test_full_post(self, app):
        with app.test_request_context():
            html = create_post_html(self._post())
        assert 'id="post-7"' in html
        assert 'Fragment &lt;Title&gt;' in html
        assert 'href="http://blog.test/post/fragment-title"' in html
        assert '<p>Hello</p>' in html
        assert '<script>' not in html
        assert 'March 05, 2024' in html
        assert '>4</span>' in html
        assert 'post-edit' not in html

    def test_title_format(self, app):
        with app.test_request_context():
            html = create_post_html(self._post(), 'title')
        assert 'post-title-row' in html
        assert 'Mar 05, 2024' in html
        assert 'post-content' not in html

    def test_owner_sees_edit_link(self, app):
        with app.test_request_context():
            html = create_post_html(self._post(), is_owner=True)
        assert 'href="http://blog.test/posts/update/7"' in html

    def test_link_post_points_at_link(self, app):
        with app.test_request_context():
            html = create_post_html(self._post(link='https://example.com/story'), 'title')
        assert 'href="https://example.com/story"' in html

    def test_gallery_images(self, app):
        images = [PostImage(url='/static/a.jpg', caption='First'), PostImage(url='/static/b.jpg')]
        post = self._post(display_type=PostDisplayType.MULTIPHOTO_POST)
        with app.test_request_context():
            html = create_post_html(post, images=images)
        assert 'post-gallery' in html
        assert 'src="/static/a.jpg"' in html
        assert '<figcaption>First</figcaption>' in html
        assert 'alt="Fragment &lt;Title&gt;"' in html

    def test_unknown_format(self, app):
        with app.test_request_context():
            with pytest.raises(ValueError, match='unknown post format'):
                create_post_html(self._post(), 'summary')
