"""
WSGI file. To host behind a WSGI server (gunicorn, mod_wsgi, PythonAnywhere):
 - Install the package into your virtualenv
 - Point YELPCAMP_SETTINGS at a settings file with a real SECRET_KEY
 - Create the database with "python create_db.py"
 - Serve 'application' from this module, e.g. gunicorn yelpcamp_wsgi:application
"""
import logging

logging.basicConfig(format="%(asctime)s: %(message)s",
                    datefmt='%Y-%m-%d %H:%M:%S')
logging.root.setLevel(logging.INFO)

from yelpcamp.app import create_app  # pylint:disable=wrong-import-position

# WSGI servers require us to provide a variable called 'application'
application = create_app()
