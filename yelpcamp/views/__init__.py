"""
Blueprints for the site's pages
"""
from yelpcamp.views import campgrounds, main, reviews, users

BLUEPRINTS = [main.BP, campgrounds.BP, reviews.BP, users.BP]
