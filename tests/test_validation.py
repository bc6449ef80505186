"""
Tests for campground and review validation.
"""
from yelpcamp.forms.validation import Violation, validate_campground,  \
    validate_review
from tests.conftest import campground_data, review_data

def fields(violations):
    return [violation.field for violation in violations]

def test_valid_campground(app):
    with app.test_request_context('/campgrounds', method='POST',
                                  data=campground_data()):
        form, violations = validate_campground()
    assert violations == []
    assert form.title.data == 'Misty Hollow'
    assert str(form.price.data) == '12.50'

def test_campground_missing_fields(app):
    data = campground_data(title=None, description='')
    with app.test_request_context('/campgrounds', method='POST', data=data):
        _form, violations = validate_campground()
    assert fields(violations) == ['title', 'description']
    assert str(violations[0]) == 'title: This field is required.'

def test_campground_bad_price_and_image(app):
    data = campground_data(price='-1', image='not a url')
    with app.test_request_context('/campgrounds', method='POST', data=data):
        _form, violations = validate_campground()
    assert fields(violations) == ['price', 'image']

def test_campground_price_must_be_a_number(app):
    data = campground_data(price='cheap')
    with app.test_request_context('/campgrounds', method='POST', data=data):
        _form, violations = validate_campground()
    assert violations
    assert set(fields(violations)) == {'price'}

def test_free_campground_is_allowed(app):
    data = campground_data(price='0')
    with app.test_request_context('/campgrounds', method='POST', data=data):
        _form, violations = validate_campground()
    assert violations == []

def test_valid_review(app):
    with app.test_request_context('/campgrounds/1/reviews', method='POST',
                                  data=review_data()):
        form, violations = validate_review()
    assert violations == []
    assert form.rating.data == 5

def test_review_rating_range(app):
    for rating in ('0', '6'):
        with app.test_request_context('/campgrounds/1/reviews',
                                      method='POST',
                                      data=review_data(rating=rating)):
            _form, violations = validate_review()
        assert fields(violations) == ['rating']

def test_review_missing_everything(app):
    with app.test_request_context('/campgrounds/1/reviews', method='POST',
                                  data={}):
        _form, violations = validate_review()
    assert fields(violations) == ['rating', 'body']

def test_violation_str():
    assert str(Violation('body', 'This field is required.')) ==  \
        'body: This field is required.'
