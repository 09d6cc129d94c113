import datetime

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.urls import reverse

from .config import HelloSettings
from .models import Book
from .views import AppVarView


def test_index_returns_greeting(client):
    response = client.get(reverse('hello:index'))
    assert response.status_code == 200
    assert response.content.decode('utf-8') == 'こんにちは、世界！'


def test_view_renders_greeting(client):
    response = client.get(reverse('hello:view'))
    assert response.status_code == 200
    assert response.context['msg'] == 'こんにちは、世界！ (view)'
    assert 'こんにちは、世界！ (view)' in response.content.decode('utf-8')


@pytest.mark.django_db
def test_list_exposes_all_books(client):
    Book.objects.create(isbn='978-4-7741-5067-3', title='Rails Book', price=3000,
                        publish='Gihyo', published=datetime.date(2012, 1, 1))
    Book.objects.create(isbn='978-4-7741-5068-0', title='Another Book', cd=True)
    response = client.get(reverse('hello:list'))
    assert response.status_code == 200
    assert [b.title for b in response.context['books']] == ['Rails Book', 'Another Book']


@pytest.mark.django_db
def test_list_with_no_books(client):
    response = client.get(reverse('hello:list'))
    assert list(response.context['books']) == []


def test_app_var_returns_configured_author(rf):
    view = AppVarView.as_view(config=HelloSettings(author='Jane'))
    response = view(rf.get('/hello/app_var/'))
    assert response.content.decode('utf-8') == 'Jane'


def test_app_var_route_uses_project_settings(client):
    response = client.get(reverse('hello:app_var'))
    assert response.content.decode('utf-8') == 'Test Author'


def test_app_var_without_config_fails(rf):
    with pytest.raises(ImproperlyConfigured):
        AppVarView.as_view()(rf.get('/hello/app_var/'))


def test_settings_from_django_settings(settings):
    settings.APP_AUTHOR = 'Jane'
    assert HelloSettings.from_settings() == HelloSettings(author='Jane')


def test_settings_missing_author(settings):
    del settings.APP_AUTHOR
    with pytest.raises(ImproperlyConfigured):
        HelloSettings.from_settings()


def test_app_var_route_reads_author_per_request(client, settings):
    assert client.get(reverse('hello:app_var')).content.decode('utf-8') == 'Test Author'
    settings.APP_AUTHOR = 'Jane'
    assert client.get(reverse('hello:app_var')).content.decode('utf-8') == 'Jane'


def test_app_var_factory_is_called_each_request(rf):
    authors = iter(['first', 'second'])
    view = AppVarView.as_view(config_factory=lambda: HelloSettings(author=next(authors)))
    assert view(rf.get('/hello/app_var/')).content.decode('utf-8') == 'first'
    assert view(rf.get('/hello/app_var/')).content.decode('utf-8') == 'second'
