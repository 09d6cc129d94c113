from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


@dataclass(frozen=True)
class HelloSettings:
    author: str

    @classmethod
    def from_settings(cls):
        author = getattr(settings, 'APP_AUTHOR', None)
        if author is None:
            raise ImproperlyConfigured('APP_AUTHOR must be set for the hello app.')
        return cls(author=author)
