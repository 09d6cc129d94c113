import logging

from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

logger = logging.getLogger(__name__)


class PostQuerySet(models.QuerySet):
    def title_or_body_matches(self, q):
        # icontains escapes % and _, so q is matched literally
        logger.debug('searching posts for %r', q)
        return self.filter(Q(title__icontains=q) | Q(body__icontains=q))


class Post(models.Model):
    title = models.CharField(max_length=20)
    body = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostQuerySet.as_manager()

    class Meta:
        db_table = 'posts'

    def __str__(self):
        return self.title

    def clean(self):
        # blank=False only rejects the empty string
        if self.title is not None and not self.title.strip():
            raise ValidationError({'title': 'This field cannot be blank.'})

    def save(self, *args, **kwargs):
        try:
            self.full_clean()
        except ValidationError as exc:
            logger.info('rejected post %r: %s', self.title, exc.message_dict)
            raise
        super().save(*args, **kwargs)


class Comment(models.Model):
    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='comments',
        db_index=False,
    )
    comment = models.CharField(max_length=255, blank=True, null=True)
    name = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'comments'
        ordering = ['id']
        indexes = [
            models.Index(fields=['post'], name='index_comments_on_post_id'),
        ]

    def __str__(self):
        return f'{self.name}: {self.comment}'
