"""
Declares database tables
"""
import datetime
from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime,  \
    ForeignKey
from sqlalchemy.orm import relationship, backref
from werkzeug.security import generate_password_hash, check_password_hash
from yelpcamp.db.creation import BASE

#pylint:disable=R0903

MAX_USERNAME = 40
MAX_EMAIL = 256
MAX_TITLE = 100
MAX_LOCATION = 200
MAX_URL = 500

def _utcnow():
    """ Naive UTC timestamp, for DateTime defaults """
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)

class User(BASE):
    """
    A registered user of the application.

    Has a one-to-many relationship with Campground (as author).
    """
    __tablename__ = 'user'
    userid = Column(Integer, primary_key=True)
    username = Column(String(MAX_USERNAME), nullable=False, unique=True,
                      index=True)
    email = Column(String(MAX_EMAIL), nullable=False, unique=True)
    password_hash = Column(String(256), nullable=False)
    created = Column(DateTime, nullable=False, default=_utcnow)

    def set_password(self, password):
        """
        Store a salted hash of password, never the password itself
        """
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """
        Does password match the stored hash?
        """
        return check_password_hash(self.password_hash, password)

class Campground(BASE):
    """
    A campground listing, owned by the user who created it.

    Has one-to-many relationships with CampgroundImage and Review, both of
    which are deleted along with the campground.
    """
    __tablename__ = 'campground'
    campgroundid = Column(Integer, primary_key=True)
    title = Column(String(MAX_TITLE), nullable=False)
    location = Column(String(MAX_LOCATION), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=False)
    authorid = Column(Integer, ForeignKey("user.userid"), nullable=False,
                      index=True)
    created = Column(DateTime, nullable=False, default=_utcnow)

    author = relationship("User", backref=backref("campgrounds"))
    images = relationship("CampgroundImage",
                          order_by="CampgroundImage.imageid",
                          cascade="all, delete-orphan",
                          back_populates="campground")
    reviews = relationship("Review",
                           order_by="Review.reviewid",
                           cascade="all, delete-orphan",
                           back_populates="campground")

class CampgroundImage(BASE):
    """
    An image of a campground. Either a remote URL, or a file uploaded with the
    campground form, in which case filename is the name it was saved under.
    """
    __tablename__ = 'campground_image'
    imageid = Column(Integer, primary_key=True)
    campgroundid = Column(Integer, ForeignKey("campground.campgroundid"),
                          nullable=False, index=True)
    url = Column(String(MAX_URL), nullable=False)
    filename = Column(String(MAX_URL), nullable=True)

    campground = relationship("Campground", back_populates="images")

class Review(BASE):
    """
    A rating and comment attached to exactly one campground.
    """
    __tablename__ = 'review'
    reviewid = Column(Integer, primary_key=True)
    campgroundid = Column(Integer, ForeignKey("campground.campgroundid"),
                          nullable=False, index=True)
    body = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)
    created = Column(DateTime, nullable=False, default=_utcnow)

    campground = relationship("Campground", back_populates="reviews")
