"""
Unit tests for the Post aggregate.
"""
import pytest
from devconnect.core.errors import AlreadyLiked, Forbidden, NotFound, NotLiked, ValidationError
from devconnect.domain.models import Comment, Post


@pytest.fixture
def post():
    return Post(id="post-1", user_id="author", text="Hello world", name="Author")


class TestLikes:
    """Tests for like/unlike"""

    def test_like_prepends(self, post):
        post.like("a")
        post.like("b")
        assert [like.user_id for like in post.likes] == ["b", "a"]

    def test_like_twice_raises_and_keeps_list(self, post):
        post.like("a")
        with pytest.raises(AlreadyLiked):
            post.like("a")
        assert [like.user_id for like in post.likes] == ["a"]

    def test_unlike_removes_only_caller(self, post):
        post.like("a")
        post.like("b")
        post.unlike("a")
        assert [like.user_id for like in post.likes] == ["b"]

    def test_unlike_without_like_raises(self, post):
        post.like("b")
        with pytest.raises(NotLiked):
            post.unlike("a")
        assert [like.user_id for like in post.likes] == ["b"]


class TestComments:
    """Tests for add_comment/remove_comment"""

    def test_add_comment_prepends(self, post):
        post.add_comment(Comment(id="c1", user_id="a", text="first"))
        post.add_comment(Comment(id="c2", user_id="b", text="second"))
        assert [comment.id for comment in post.comments] == ["c2", "c1"]

    def test_remove_comment_by_own_id(self, post):
        # Two comments by the same user; only the targeted one goes
        post.add_comment(Comment(id="c1", user_id="a", text="one"))
        post.add_comment(Comment(id="c2", user_id="a", text="two"))
        removed = post.remove_comment("c1", "a")
        assert removed.id == "c1"
        assert [comment.id for comment in post.comments] == ["c2"]

    def test_remove_someone_elses_comment_forbidden(self, post):
        post.add_comment(Comment(id="c1", user_id="a", text="one"))
        with pytest.raises(Forbidden):
            post.remove_comment("c1", "b")
        assert len(post.comments) == 1

    def test_remove_missing_comment_not_found(self, post):
        with pytest.raises(NotFound, match="Comment does not exist"):
            post.remove_comment("nope", "a")

    def test_blank_comment_rejected(self):
        with pytest.raises(ValidationError):
            Comment(id="c1", user_id="a", text="   ")


class TestOwnership:
    def test_owner_passes(self, post):
        post.ensure_owned_by("author")

    def test_other_user_forbidden(self, post):
        with pytest.raises(Forbidden, match="User not authorized"):
            post.ensure_owned_by("someone-else")


def test_blank_text_rejected():
    with pytest.raises(ValidationError):
        Post(id=None, user_id="author", text="  ")
