import logging

from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponse
from django.shortcuts import render
from django.views import View

from .models import Book

logger = logging.getLogger(__name__)

GREETING = 'こんにちは、世界！'


def index(request):
    return HttpResponse(GREETING, content_type='text/plain; charset=utf-8')


def view(request):
    return render(request, 'hello/view.html', {'msg': f'{GREETING} (view)'})


def book_list(request):
    books = Book.objects.all()
    logger.debug('listing books')
    return render(request, 'hello/list.html', {'books': books})


class AppVarView(View):
    """Respond with the configured author.

    Either a fixed ``config`` or a ``config_factory`` called on every
    request is handed in through ``as_view()``.
    """

    config = None
    config_factory = None

    def get(self, request):
        config = self.config
        if config is None:
            if self.config_factory is None:
                raise ImproperlyConfigured('AppVarView needs a config or a config_factory.')
            config = self.config_factory()
        return HttpResponse(config.author, content_type='text/plain; charset=utf-8')
