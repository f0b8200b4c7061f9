from django.urls import path
from . import views


urlpatterns = [
    path('', views.TrainingPlaylistView.as_view(), name='training-playlist'),
    path('items/', views.save_training_item, name='training-item-save'),
    path('progress/', views.TrainingProgressView.as_view(), name='training-progress'),
    path('progress/<str:item_id>/toggle/', views.toggle_training_item, name='training-progress-toggle'),
]
