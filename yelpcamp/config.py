"""
Configuration for Flask and its plugins
"""
from datetime import timedelta

# Any of these can be overridden in the file named by YELPCAMP_SETTINGS
SECRET_KEY = 'thisshouldbeabettersecret'  # Overridden in YELPCAMP_SETTINGS
DEBUG = False
RELOADER = False
HOST = '127.0.0.1'
PORT = 3000

SQLALCHEMY_DATABASE_URI = 'sqlite:///yelpcamp.db'

PERMANENT_SESSION_LIFETIME = timedelta(days=7)
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = 'Lax'

WTF_CSRF_TIME_LIMIT = None  # No time limit on form submission (minor risk)

UPLOAD_FOLDER = None  # None means <instance path>/uploads
MAX_CONTENT_LENGTH = 16 * 1024 * 1024
