"""
Fixtures: an application with an empty in-memory database, its API, a test
client, and helpers for logging in and filling in forms.
"""
from decimal import Decimal
import re
import pytest
from yelpcamp.app import create_app
from yelpcamp.core.dtos import CampgroundRequest, RegisterRequest

PASSWORD = 'monkey'

@pytest.fixture
def app(tmp_path):
    """ Application with an empty database and CSRF checks off """
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'testing',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'WTF_CSRF_ENABLED': False,
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
    })
    assert app.extensions['yelpcamp']().create_db() is None
    return app

@pytest.fixture
def api(app):
    return app.extensions['yelpcamp']()

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def make_user(api):
    """ Create a user directly through the API """
    def make(username='colt'):
        return api.register(RegisterRequest(
            username, '%s@yelpcamp.dev' % (username,), PASSWORD))
    return make

@pytest.fixture
def login(client):
    """ Log the test client in """
    def do_login(username='colt', password=PASSWORD, follow_redirects=False):
        return client.post('/login',
                           data={'username': username, 'password': password},
                           follow_redirects=follow_redirects)
    return do_login

@pytest.fixture
def make_campground(api):
    """ Create a campground directly through the API """
    def make(user, title='Misty Hollow'):
        return api.create_campground(user.userid, CampgroundRequest(
            title=title, location='Bend, Oregon', price=Decimal('12.50'),
            description='Quiet and damp'))
    return make

def campground_data(**overrides):
    """ Form data for a campground submission """
    data = {
        'campground-title': 'Misty Hollow',
        'campground-location': 'Bend, Oregon',
        'campground-price': '12.50',
        'campground-description': 'Quiet and damp',
        'campground-image': '',
    }
    data.update(('campground-%s' % (key,), value)
                for key, value in overrides.items())
    return dict((key, value) for key, value in data.items()
                if value is not None)

def review_data(body='Lovely spot', rating='5'):
    """ Form data for a review submission """
    data = {'review-body': body, 'review-rating': rating}
    return dict((key, value) for key, value in data.items()
                if value is not None)

def form_actions(page):
    """ The action of every form on a rendered page, in page order """
    return [action.decode('utf-8')
            for action in re.findall(rb'<form[^>]*action="([^"]*)"',
                                     page.data)]
