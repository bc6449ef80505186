"""
Module for creating database
"""
from yelpcamp.app import create_app
from yelpcamp.core import backendconfig

def create_all():
    """
    Creates the database
    """
    app = create_app(backendconfig.app_config())
    return app.extensions['yelpcamp']().create_db()

if __name__ == '__main__':
    RESULT = create_all()
    if RESULT:
        print("Error:", RESULT)
