#pylint:disable=R0903,R0904
"""
Core API for the YelpCamp backend.
"""
from functools import wraps
import logging
from sqlalchemy.orm import sessionmaker
from yelpcamp.db.creation import BASE, create_session
from yelpcamp.db import tables
from yelpcamp.core import dtos

def exception_mapper(fun):
    """
    Converts database exceptions to APIError
    """
    @wraps(fun)
    def inner(*args, **kwargs):
        """
        Catch exceptions and return API.ERR_UNKNOWN
        """
        # pylint:disable=W0703
        try:
            return fun(*args, **kwargs)
        except Exception:
            logging.exception("Unhandled exception in API function %s",
                              fun.__name__)
            return API.ERR_UNKNOWN
    return inner

def api(fun):
    """
    Equivalent to:
        @exception_mapper
        @create_session

    Used to ensure exception_mapper and create_session are applied in the
    correct order.
    """
    @wraps(fun)
    @exception_mapper
    @create_session
    def inner(*args, **kwargs):
        """
        Additional functionality: rollback on error. That needs to be here
        because it needs knowledge of both self.session and APIError.
        """
        self = args[0]
        try:
            result = fun(*args, **kwargs)
        except BaseException:
            self.session.rollback()
            raise
        if isinstance(result, APIError):
            self.session.rollback()
        return result
    return inner

class APIError(object):
    """
    These objects will be returned by API methods, instead of raising
    """
    def __init__(self, description):
        self.description = description

    def __str__(self):
        return self.description

    def __repr__(self):
        return "APIError(%r)" % (self.description,)

class API(object):
    """
    Core YelpCamp API, which may be called by:
     - the website
     - the admin console
    """

    ERR_UNKNOWN = APIError("Internal error")
    ERR_NO_SUCH_USER = APIError("No such user")
    ERR_NO_SUCH_CAMPGROUND = APIError("Cannot find that campground")
    ERR_NO_SUCH_REVIEW = APIError("Cannot find that review")
    ERR_DUPLICATE_USERNAME =  \
        APIError("A user with the given username is already registered")
    ERR_DUPLICATE_EMAIL =  \
        APIError("A user with the given email is already registered")
    ERR_BAD_CREDENTIALS = APIError("Password or username is incorrect")

    def __init__(self, engine, session_factory=None):
        self.engine = engine
        self.session_factory = session_factory or sessionmaker(bind=engine)
        self.session = None  # required for @create_session

    @exception_mapper
    def create_db(self):
        """
        Create all tables that don't exist yet
        """
        BASE.metadata.create_all(self.engine)

    @exception_mapper
    def delete_db(self):
        """
        Delete database, and everything in it
        """
        BASE.metadata.drop_all(self.engine)

    def _get_campground(self, campgroundid):
        """
        Campground with this id, or None
        """
        return self.session.get(tables.Campground, campgroundid)

    @api
    def register(self, request):
        """
        Create a user. Returns UserDetails, or ERR_DUPLICATE_USERNAME or
        ERR_DUPLICATE_EMAIL.
        """
        matches = self.session.query(tables.User)  \
            .filter(tables.User.username == request.username).all()
        if matches:
            return self.ERR_DUPLICATE_USERNAME
        matches = self.session.query(tables.User)  \
            .filter(tables.User.email == request.email).all()
        if matches:
            return self.ERR_DUPLICATE_EMAIL
        user = tables.User()
        user.username = request.username
        user.email = request.email
        user.set_password(request.password)
        self.session.add(user)
        self.session.flush()
        logging.debug("Created user %d with username '%s'", user.userid,
                      user.username)
        return dtos.UserDetails.from_user(user)

    @api
    def authenticate(self, username, password):
        """
        Check a username and password. Returns UserDetails, or
        ERR_BAD_CREDENTIALS whether it was the username or the password that
        was wrong.
        """
        user = self.session.query(tables.User)  \
            .filter(tables.User.username == username).one_or_none()
        if user is None or not user.check_password(password):
            logging.debug("Failed login for username '%s'", username)
            return self.ERR_BAD_CREDENTIALS
        return dtos.UserDetails.from_user(user)

    @api
    def get_user_by_username(self, username):
        """
        Return UserDetails for the named user, or ERR_NO_SUCH_USER
        """
        user = self.session.query(tables.User)  \
            .filter(tables.User.username == username).one_or_none()
        if user is None:
            return self.ERR_NO_SUCH_USER
        return dtos.UserDetails.from_user(user)

    @api
    def get_users(self):
        """
        Return a list of UserDetails for all users
        """
        users = self.session.query(tables.User)  \
            .order_by(tables.User.userid).all()
        return [dtos.UserDetails.from_user(user) for user in users]

    @api
    def get_campgrounds(self):
        """
        Return a list of CampgroundDetails for all campgrounds, oldest first
        """
        campgrounds = self.session.query(tables.Campground)  \
            .order_by(tables.Campground.campgroundid).all()
        return [dtos.CampgroundDetails.from_campground(campground)
                for campground in campgrounds]

    @api
    def get_campground(self, campgroundid):
        """
        Return CampgroundDetails, with author and reviews, or
        ERR_NO_SUCH_CAMPGROUND
        """
        campground = self._get_campground(campgroundid)
        if campground is None:
            return self.ERR_NO_SUCH_CAMPGROUND
        return dtos.CampgroundDetails.from_campground(campground)

    @api
    def get_campground_author(self, campgroundid):
        """
        Return the userid of the campground's author, or
        ERR_NO_SUCH_CAMPGROUND
        """
        campground = self._get_campground(campgroundid)
        if campground is None:
            return self.ERR_NO_SUCH_CAMPGROUND
        return campground.authorid

    def _add_campground(self, userid, request):
        """
        Add a campground authored by userid, without committing
        """
        campground = tables.Campground()
        campground.authorid = userid
        self._apply_request(campground, request)
        self.session.add(campground)
        return campground

    @staticmethod
    def _apply_request(campground, request):
        """
        Overwrite campground fields from request, and append its images
        """
        campground.title = request.title
        campground.location = request.location
        campground.price = request.price
        campground.description = request.description
        for details in request.images:
            image = tables.CampgroundImage()
            image.url = details.url
            image.filename = details.filename
            campground.images.append(image)

    @api
    def create_campground(self, userid, request):
        """
        Create a campground authored by userid. Returns CampgroundDetails, or
        ERR_NO_SUCH_USER.
        """
        if self.session.get(tables.User, userid) is None:
            return self.ERR_NO_SUCH_USER
        campground = self._add_campground(userid, request)
        self.session.flush()
        logging.debug("User %d created campground %d, '%s'", userid,
                      campground.campgroundid, campground.title)
        return dtos.CampgroundDetails.from_campground(campground)

    @api
    def update_campground(self, campgroundid, request):
        """
        Overwrite a campground's fields and add any new images. Returns
        CampgroundDetails, or ERR_NO_SUCH_CAMPGROUND.
        """
        campground = self._get_campground(campgroundid)
        if campground is None:
            return self.ERR_NO_SUCH_CAMPGROUND
        self._apply_request(campground, request)
        self.session.flush()
        logging.debug("Updated campground %d, '%s'", campgroundid,
                      campground.title)
        return dtos.CampgroundDetails.from_campground(campground)

    @api
    def delete_campground(self, campgroundid):
        """
        Delete a campground, its images and its reviews. Returns the list of
        uploaded filenames that belonged to it, or ERR_NO_SUCH_CAMPGROUND.
        """
        campground = self._get_campground(campgroundid)
        if campground is None:
            return self.ERR_NO_SUCH_CAMPGROUND
        filenames = [image.filename for image in campground.images
                     if image.filename]
        review_count = len(campground.reviews)
        self.session.delete(campground)
        logging.debug("Deleted campground %d and its %d reviews",
                      campgroundid, review_count)
        return filenames

    @api
    def add_review(self, campgroundid, request):
        """
        Add a review to a campground. Returns ReviewDetails, or
        ERR_NO_SUCH_CAMPGROUND.
        """
        campground = self._get_campground(campgroundid)
        if campground is None:
            return self.ERR_NO_SUCH_CAMPGROUND
        review = tables.Review()
        review.body = request.body
        review.rating = request.rating
        campground.reviews.append(review)
        self.session.flush()
        logging.debug("Added review %d to campground %d", review.reviewid,
                      campgroundid)
        return dtos.ReviewDetails.from_review(review)

    @api
    def delete_review(self, campgroundid, reviewid):
        """
        Remove a review from a campground and delete it. Returns None,
        ERR_NO_SUCH_CAMPGROUND, or ERR_NO_SUCH_REVIEW if the campground has no
        such review.
        """
        campground = self._get_campground(campgroundid)
        if campground is None:
            return self.ERR_NO_SUCH_CAMPGROUND
        matches = [review for review in campground.reviews
                   if review.reviewid == reviewid]
        if not matches:
            return self.ERR_NO_SUCH_REVIEW
        # delete-orphan: removing it from the list deletes the row
        campground.reviews.remove(matches[0])
        logging.debug("Deleted review %d from campground %d", reviewid,
                      campgroundid)

    @api
    def reseed(self, userid, requests):
        """
        Delete every campground, then create one per request, all authored by
        userid. Returns the number created, or ERR_NO_SUCH_USER.
        """
        if self.session.get(tables.User, userid) is None:
            return self.ERR_NO_SUCH_USER
        for campground in self.session.query(tables.Campground).all():
            self.session.delete(campground)
        for request in requests:
            self._add_campground(userid, request)
        logging.debug("Reseeded with %d campgrounds", len(requests))
        return len(requests)
