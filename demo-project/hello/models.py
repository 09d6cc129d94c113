from django.db import models


class Book(models.Model):
    isbn = models.CharField(max_length=17)
    title = models.CharField(max_length=255)
    price = models.IntegerField(default=0)
    publish = models.CharField(max_length=255, blank=True)
    published = models.DateField(blank=True, null=True)
    cd = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'books'
        ordering = ['id']

    def __str__(self):
        return self.title
