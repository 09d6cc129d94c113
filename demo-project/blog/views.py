import logging

from django.shortcuts import get_object_or_404, render

from .models import Post

logger = logging.getLogger(__name__)


def post_list(request):
    q = request.GET.get('q', '').strip()
    posts = Post.objects.all()
    if q:
        posts = posts.title_or_body_matches(q)
    posts = posts.order_by('-created_at', '-id')
    return render(request, 'blog/post_list.html', {'posts': posts, 'q': q})


def post_detail(request, pk):
    post = get_object_or_404(Post, pk=pk)
    logger.debug('showing post %s', pk)
    return render(request, 'blog/post_detail.html', {
        'post': post,
        'comments': post.comments.all(),
    })
