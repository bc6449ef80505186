"""
Runs the YelpCamp application locally, on port 3000 by default.

Note: when hosted behind a WSGI server, this script is not used. See
yelpcamp_wsgi.py.
"""
import logging
from yelpcamp.app import create_app
from yelpcamp.core import backendconfig

def _main():
    """
    Does some initialisation, then runs the website.
    """
    app = create_app(backendconfig.app_config())
    # Initialise database
    result = app.extensions['yelpcamp']().create_db()
    if result:
        logging.error("Could not create database: %s", result)
        return
    # Run the app locally
    app.run(host=app.config.get('HOST', '127.0.0.1'),
            port=app.config.get('PORT', 3000),
            debug=app.config['DEBUG'],
            use_reloader=app.config.get('RELOADER', False))

if  __name__ == '__main__':
    logging.basicConfig(format="%(asctime)s: %(message)s",
                        datefmt='%Y-%m-%d %H:%M:%S')
    logging.root.setLevel(backendconfig.DEBUG_LEVEL)
    _main()
