from django.urls import path

from . import views
from .config import HelloSettings

app_name = 'hello'

urlpatterns = [
    path('', views.index, name='index'),
    path('view/', views.view, name='view'),
    path('list/', views.book_list, name='list'),
    path('app_var/', views.AppVarView.as_view(config_factory=HelloSettings.from_settings), name='app_var'),
]
