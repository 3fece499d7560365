from django.urls import path
from . import views

app_name = 'pages'
urlpatterns = [
    # Presentation (the deck itself runs in the browser)
    path("", views.home, name="home"),
    path("deck/<slug:deck_id>/", views.deck, name="deck"),
]
