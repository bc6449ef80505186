"""
Tests for the core API, without going through the web layer.
"""
from decimal import Decimal
from yelpcamp.core.api import API
from yelpcamp.core.dtos import CampgroundRequest, ImageDetails,  \
    RegisterRequest, ReviewRequest
from yelpcamp.db import tables
from yelpcamp.db.creation import session_scope
from tests.conftest import PASSWORD

def count_rows(api, table):
    with session_scope(api.session_factory) as session:
        return session.query(table).count()

def test_register_and_authenticate(api, make_user):
    user = make_user('colt')
    assert user.userid is not None
    assert user.username == 'colt'
    assert user.email == 'colt@yelpcamp.dev'

    assert api.authenticate('colt', PASSWORD) == user
    assert api.authenticate('colt', 'wrong') is API.ERR_BAD_CREDENTIALS
    assert api.authenticate('nobody', PASSWORD) is API.ERR_BAD_CREDENTIALS

def test_password_is_hashed(api, make_user):
    make_user('colt')
    with session_scope(api.session_factory) as session:
        user = session.query(tables.User).one()
        assert user.password_hash != PASSWORD
        assert user.check_password(PASSWORD)

def test_register_duplicates(api, make_user):
    make_user('colt')
    result = api.register(RegisterRequest('colt', 'other@yelpcamp.dev', 'x'))
    assert result is API.ERR_DUPLICATE_USERNAME
    result = api.register(RegisterRequest('other', 'colt@yelpcamp.dev', 'x'))
    assert result is API.ERR_DUPLICATE_EMAIL
    assert count_rows(api, tables.User) == 1

def test_get_user_by_username(api, make_user):
    user = make_user('colt')
    assert api.get_user_by_username('colt') == user
    assert api.get_user_by_username('nobody') is API.ERR_NO_SUCH_USER

def test_create_and_get_campground(api, make_user):
    user = make_user()
    request = CampgroundRequest(title='Misty Hollow', location='Bend, Oregon',
        price=Decimal('12.50'), description='Quiet and damp',
        images=[ImageDetails('https://example.org/tent.jpg')])
    created = api.create_campground(user.userid, request)
    fetched = api.get_campground(created.campgroundid)
    assert fetched.title == 'Misty Hollow'
    assert fetched.location == 'Bend, Oregon'
    assert fetched.price == Decimal('12.50')
    assert fetched.author == user
    assert fetched.images == [ImageDetails('https://example.org/tent.jpg')]
    assert fetched.reviews == []
    assert api.get_campground_author(created.campgroundid) == user.userid

def test_create_campground_needs_a_user(api):
    request = CampgroundRequest('t', 'l', Decimal(1), 'd')
    assert api.create_campground(42, request) is API.ERR_NO_SUCH_USER
    assert count_rows(api, tables.Campground) == 0

def test_missing_campground(api):
    assert api.get_campground(42) is API.ERR_NO_SUCH_CAMPGROUND
    assert api.get_campground_author(42) is API.ERR_NO_SUCH_CAMPGROUND
    request = CampgroundRequest('t', 'l', Decimal(1), 'd')
    assert api.update_campground(42, request) is API.ERR_NO_SUCH_CAMPGROUND
    assert api.delete_campground(42) is API.ERR_NO_SUCH_CAMPGROUND
    assert api.add_review(42, ReviewRequest('b', 3))  \
        is API.ERR_NO_SUCH_CAMPGROUND

def test_update_overwrites_fields_and_adds_images(api, make_user,
                                                  make_campground):
    user = make_user()
    campground = make_campground(user)
    api.update_campground(campground.campgroundid, CampgroundRequest(
        title='Dry Flats', location='Moab, Utah', price=Decimal('30'),
        description='Sunny', images=[ImageDetails('/uploads/a.png', 'a.png')]))
    api.update_campground(campground.campgroundid, CampgroundRequest(
        title='Dry Flats', location='Moab, Utah', price=Decimal('30'),
        description='Sunny', images=[ImageDetails('https://example.org/b')]))
    fetched = api.get_campground(campground.campgroundid)
    assert (fetched.title, fetched.location, fetched.description) ==  \
        ('Dry Flats', 'Moab, Utah', 'Sunny')
    assert fetched.price == Decimal('30')
    assert [image.url for image in fetched.images] ==  \
        ['/uploads/a.png', 'https://example.org/b']

def test_reviews_in_order(api, make_user, make_campground):
    campground = make_campground(make_user())
    first = api.add_review(campground.campgroundid, ReviewRequest('Nice', 4))
    second = api.add_review(campground.campgroundid, ReviewRequest('Meh', 2))
    fetched = api.get_campground(campground.campgroundid)
    assert [r.reviewid for r in fetched.reviews] ==  \
        [first.reviewid, second.reviewid]
    assert fetched.average_rating() == 3.0

def test_delete_review_removes_reference_and_row(api, make_user,
                                                 make_campground):
    campground = make_campground(make_user())
    keep = api.add_review(campground.campgroundid, ReviewRequest('Nice', 4))
    gone = api.add_review(campground.campgroundid, ReviewRequest('Meh', 2))
    assert api.delete_review(campground.campgroundid, gone.reviewid) is None
    fetched = api.get_campground(campground.campgroundid)
    assert [r.reviewid for r in fetched.reviews] == [keep.reviewid]
    assert count_rows(api, tables.Review) == 1

def test_delete_review_of_another_campground(api, make_user, make_campground):
    user = make_user()
    one = make_campground(user, 'One')
    two = make_campground(user, 'Two')
    review = api.add_review(one.campgroundid, ReviewRequest('Nice', 4))
    result = api.delete_review(two.campgroundid, review.reviewid)
    assert result is API.ERR_NO_SUCH_REVIEW
    assert count_rows(api, tables.Review) == 1
    assert api.delete_review(42, review.reviewid)  \
        is API.ERR_NO_SUCH_CAMPGROUND

def test_delete_campground_deletes_reviews_and_images(api, make_user):
    user = make_user()
    campground = api.create_campground(user.userid, CampgroundRequest(
        title='t', location='l', price=Decimal(1), description='d',
        images=[ImageDetails('/uploads/a.png', 'a.png'),
                ImageDetails('https://example.org/b')]))
    api.add_review(campground.campgroundid, ReviewRequest('Nice', 4))
    assert api.delete_campground(campground.campgroundid) == ['a.png']
    assert count_rows(api, tables.Campground) == 0
    assert count_rows(api, tables.Review) == 0
    assert count_rows(api, tables.CampgroundImage) == 0
    assert count_rows(api, tables.User) == 1

def test_reseed_replaces_campgrounds(api, make_user, make_campground):
    user = make_user()
    make_campground(user)
    requests = [CampgroundRequest('t%d' % (i,), 'l', Decimal(i), 'd')
                for i in range(3)]
    assert api.reseed(user.userid, requests) == 3
    assert sorted(c.title for c in api.get_campgrounds()) == ['t0', 't1', 't2']
    assert api.reseed(999, requests) is API.ERR_NO_SUCH_USER
    assert count_rows(api, tables.Campground) == 3

def test_unexpected_exceptions_become_err_unknown(api):
    def broken_factory():
        raise RuntimeError("database is on fire")
    api.session_factory = broken_factory
    assert api.get_campgrounds() is API.ERR_UNKNOWN

def test_app_makes_a_fresh_api_per_call(app, api):
    other = app.extensions['yelpcamp']()
    assert other is not api
    assert other.engine is api.engine
