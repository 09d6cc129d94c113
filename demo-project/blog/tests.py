import pytest
from django.core.exceptions import ValidationError
from django.db import connection
from django.urls import reverse

from .models import Comment, Post

pytestmark = pytest.mark.django_db


@pytest.mark.parametrize('title', ['a', 'Hello', 'x' * 20, 'こんにちは'])
def test_post_with_valid_title_is_saved(title):
    post = Post(title=title, body='body')
    post.save()
    assert Post.objects.filter(pk=post.pk).exists()


@pytest.mark.parametrize('title', ['', None, 'x' * 21, '   ', '\t\n'])
def test_post_with_invalid_title_is_rejected(title):
    post = Post(title=title, body='body')
    with pytest.raises(ValidationError) as excinfo:
        post.save()
    assert 'title' in excinfo.value.message_dict
    assert post.pk is None
    assert Post.objects.count() == 0


def test_objects_create_also_validates():
    with pytest.raises(ValidationError):
        Post.objects.create(title='y' * 21)
    assert not Post.objects.exists()


def test_body_is_unconstrained():
    post = Post.objects.create(title='no body')
    assert post.body is None
    Post.objects.create(title='long body', body='z' * 10000)


def test_comments_empty_for_new_post():
    post = Post.objects.create(title='lonely')
    assert list(post.comments.all()) == []


def test_comments_are_the_posts_own_in_insertion_order():
    post = Post.objects.create(title='first')
    other = Post.objects.create(title='second')
    c1 = Comment.objects.create(post=post, name='alice', comment='one')
    Comment.objects.create(post=other, name='bob', comment='elsewhere')
    c2 = Comment.objects.create(post=post, name='carol', comment='two')
    assert list(post.comments.all()) == [c1, c2]


def test_comment_without_post_is_allowed():
    comment = Comment.objects.create(name='orphan', comment='no post')
    assert comment.post_id is None


def test_deleting_post_removes_its_comments():
    post = Post.objects.create(title='doomed')
    Comment.objects.create(post=post, name='a', comment='b')
    post.delete()
    assert not Comment.objects.exists()


def test_title_or_body_matches():
    foobar = Post.objects.create(title='foobar')
    barfoo = Post.objects.create(title='barfoo')
    Post.objects.create(title='baz')
    in_body = Post.objects.create(title='qux', body='has foo inside')
    result = set(Post.objects.title_or_body_matches('foo'))
    assert result == {foobar, barfoo, in_body}


def test_title_or_body_matches_ignores_case():
    post = Post.objects.create(title='FooBar')
    assert list(Post.objects.title_or_body_matches('foob')) == [post]


def test_title_or_body_matches_treats_wildcards_literally():
    Post.objects.create(title='plain')
    percent = Post.objects.create(title='100% done')
    assert list(Post.objects.title_or_body_matches('%')) == [percent]
    assert not Post.objects.title_or_body_matches('_').exists()


def test_post_list_searches(client):
    Post.objects.create(title='foobar')
    Post.objects.create(title='baz')
    response = client.get(reverse('blog:post_list'), {'q': 'foo'})
    assert response.status_code == 200
    assert [p.title for p in response.context['posts']] == ['foobar']
    assert response.context['q'] == 'foo'


def test_post_list_without_query_lists_everything(client):
    Post.objects.create(title='foobar')
    Post.objects.create(title='baz')
    response = client.get(reverse('blog:post_list'))
    assert len(response.context['posts']) == 2


def test_post_detail_shows_comments(client):
    post = Post.objects.create(title='with comments', body='text')
    Comment.objects.create(post=post, name='alice', comment='nice post')
    response = client.get(reverse('blog:post_detail', args=[post.pk]))
    assert response.status_code == 200
    assert 'nice post' in response.content.decode()


def test_post_detail_missing_post_is_404(client):
    response = client.get(reverse('blog:post_detail', args=[999]))
    assert response.status_code == 404


def test_comments_table_columns():
    with connection.cursor() as cursor:
        description = connection.introspection.get_table_description(cursor, 'comments')
    assert {column.name for column in description} == {
        'id', 'post_id', 'comment', 'name', 'created_at', 'updated_at',
    }


def test_comments_table_post_id_index():
    with connection.cursor() as cursor:
        constraints = connection.introspection.get_constraints(cursor, 'comments')
    index = constraints['index_comments_on_post_id']
    assert index['columns'] == ['post_id']
    assert index['index']
    assert not index['unique']
