"""
Session helpers, and the decorators that guard pages needing a login or
ownership of a campground
"""
from functools import wraps
import logging
from flask import current_app, flash, redirect, request, session, url_for
from yelpcamp.core.api import API
from yelpcamp.core.dtos import UserDetails
from yelpcamp.views.error import check_result, ValidationFailed

def get_api():
    """
    An API instance for this request, on the application's engine
    """
    return current_app.extensions['yelpcamp']()

def is_logged_in():
    """
    Is there a logged in user in this session?
    """
    return 'userid' in session and 'username' in session

def current_user():
    """
    UserDetails for the logged in user, or None
    """
    if not is_logged_in():
        return None
    return UserDetails(session['userid'], session['username'])

def log_in(user):
    """
    Record user (UserDetails) as logged in, for the session lifetime
    """
    session.permanent = True
    session['userid'] = user.userid
    session['username'] = user.username

def log_out():
    """
    Forget the logged in user
    """
    session.pop('userid', None)
    session.pop('username', None)

def inject_current_user():
    """
    Context processor, so every template knows who is logged in
    """
    return dict(current_user=current_user())

def login_required(view_func):
    """
    Redirect to the login page unless someone is logged in, remembering where
    they were going.
    """
    @wraps(view_func)
    def decorated(*args, **kwargs):
        if not is_logged_in():
            session['return_to'] = request.full_path  \
                if request.query_string else request.path
            flash("You must be signed in first", 'error')
            return redirect(url_for('users.login'))
        return view_func(*args, **kwargs)
    return decorated

def author_required(view_func):
    """
    Redirect to the campground's page unless the logged in user wrote it.

    The view must take a 'campgroundid' argument.
    """
    @wraps(view_func)
    def decorated(*args, **kwargs):
        campgroundid = kwargs['campgroundid']
        result = get_api().get_campground_author(campgroundid)
        if result is API.ERR_NO_SUCH_CAMPGROUND:
            flash(str(result), 'error')
            return redirect(url_for('campgrounds.index'))
        authorid = check_result(result)
        if authorid != session.get('userid'):
            logging.debug("User %r is not the author of campground %d",
                          session.get('userid'), campgroundid)
            flash("You are not authorized to do that", 'error')
            return redirect(url_for('campgrounds.show',
                                    campgroundid=campgroundid))
        return view_func(*args, **kwargs)
    return decorated

def validate_with(validator):
    """
    Fail the request with ValidationFailed (400) if validator finds any
    violations. Otherwise the validated form is passed to the view as 'form'.
    """
    def decorator(view_func):
        @wraps(view_func)
        def decorated(*args, **kwargs):
            form, violations = validator()
            if violations:
                logging.debug("Rejected submission to %s: %s", request.path,
                              violations)
                raise ValidationFailed(violations)
            return view_func(*args, form=form, **kwargs)
        return decorated
    return decorator
