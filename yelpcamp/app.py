"""
Defines the Flask application factory, 'create_app'
"""
from functools import partial
import logging
import os
from flask import Flask
from flask_bootstrap import Bootstrap5
from flask_wtf.csrf import CSRFProtect
from sqlalchemy.orm import sessionmaker
from yelpcamp.core.api import API
from yelpcamp.db.creation import make_engine
from yelpcamp.infrastructure.util import MethodRewriteMiddleware
from yelpcamp.views import BLUEPRINTS
from yelpcamp.views.auth import inject_current_user
from yelpcamp.views.error import register_error_handlers

def create_app(config=None):
    """
    Build the application.

    Settings come from yelpcamp.config, then the file named by the
    YELPCAMP_SETTINGS environment variable if there is one, then config.

    The application owns its database engine. app.extensions['yelpcamp']
    makes a fresh API on that engine each time it is called.
    """
    app = Flask(__name__)
    app.config.from_object('yelpcamp.config')
    app.config.from_envvar('YELPCAMP_SETTINGS', silent=True)
    if config:
        app.config.update(config)
    if not app.config.get('UPLOAD_FOLDER'):
        app.config['UPLOAD_FOLDER'] = os.path.join(app.instance_path,
                                                   'uploads')
    app.wsgi_app = MethodRewriteMiddleware(app.wsgi_app)

    Bootstrap5(app)
    CSRFProtect(app)

    engine = make_engine(app.config['SQLALCHEMY_DATABASE_URI'])
    app.extensions['yelpcamp'] = partial(API, engine,
                                         sessionmaker(bind=engine))

    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)
    app.context_processor(inject_current_user)
    register_error_handlers(app)

    logging.debug("Created app using database %s", engine.url)
    return app
