"""
Data transfer objects:
- registration, with username, email address, password
- user, with userid for user, system generated
- campground create/update request, with its images
- campground, with author, images and reviews
- review request, review
"""
#pylint:disable=R0903,R0913,R0902

class RegisterRequest(object):
    """
    Details to create a user in the database.
    """
    def __init__(self, username, email, password):
        self.username = username
        self.email = email
        self.password = password

    def __repr__(self):
        # never the password
        return "RegisterRequest(username=%r, email=%r)" %  \
            (self.username, self.email)

class UserDetails(object):
    """
    Userid and username for user, as recorded in database.

    Email is None when the details came from the session rather than the
    database.
    """
    def __init__(self, userid, username, email=None):
        self.userid = userid
        self.username = username
        self.email = email

    def __repr__(self):
        return "UserDetails(userid=%r, username=%r, email=%r)" %  \
            (self.userid, self.username, self.email)

    def __str__(self):
        return self.username

    def __eq__(self, other):
        return isinstance(other, UserDetails) and self.userid == other.userid

    def __hash__(self):
        return hash(self.userid)

    @classmethod
    def from_user(cls, user):
        """
        Create object from tables.User
        """
        return cls(user.userid, user.username, user.email)

class ImageDetails(object):
    """
    An image of a campground, and the uploaded filename, if it was uploaded.
    """
    def __init__(self, url, filename=None):
        self.url = url
        self.filename = filename

    def __repr__(self):
        return "ImageDetails(url=%r, filename=%r)" % (self.url, self.filename)

    def __eq__(self, other):
        return isinstance(other, ImageDetails) and  \
            (self.url, self.filename) == (other.url, other.filename)

    def __hash__(self):
        return hash((self.url, self.filename))

    @classmethod
    def from_image(cls, image):
        """
        Create object from tables.CampgroundImage
        """
        return cls(image.url, image.filename)

class CampgroundRequest(object):
    """
    Field values for creating a campground or overwriting an existing one.

    images is a list of ImageDetails to add to the campground. Existing images
    are never removed by an update.
    """
    def __init__(self, title, location, price, description, images=None):
        self.title = title
        self.location = location
        self.price = price
        self.description = description
        self.images = images or []

    def __repr__(self):
        return ("CampgroundRequest(title=%r, location=%r, price=%r, "
            "description=%r, images=%r)") % (self.title, self.location,
            self.price, self.description, self.images)

class ReviewRequest(object):
    """
    Field values for a new review.
    """
    def __init__(self, body, rating):
        self.body = body
        self.rating = rating

    def __repr__(self):
        return "ReviewRequest(body=%r, rating=%r)" % (self.body, self.rating)

class ReviewDetails(object):
    """
    A review, as recorded in the database.
    """
    def __init__(self, reviewid, campgroundid, body, rating, created):
        self.reviewid = reviewid
        self.campgroundid = campgroundid
        self.body = body
        self.rating = rating
        self.created = created

    def __repr__(self):
        return ("ReviewDetails(reviewid=%r, campgroundid=%r, body=%r, "
            "rating=%r)") % (self.reviewid, self.campgroundid, self.body,
            self.rating)

    @classmethod
    def from_review(cls, review):
        """
        Create object from tables.Review
        """
        return cls(reviewid=review.reviewid,
                   campgroundid=review.campgroundid,
                   body=review.body,
                   rating=review.rating,
                   created=review.created)

class CampgroundDetails(object):
    """
    A campground, with its author, its images, and its reviews in the order
    they were written.
    """
    def __init__(self, campgroundid, title, location, price, description,
                 author, images, reviews):
        self.campgroundid = campgroundid
        self.title = title
        self.location = location
        self.price = price
        self.description = description
        self.author = author
        self.images = images
        self.reviews = reviews

    def __repr__(self):
        return ("CampgroundDetails(campgroundid=%r, title=%r, location=%r, "
            "price=%r, author=%r, images=%r, reviews=%r)") %  \
            (self.campgroundid, self.title, self.location, self.price,
             self.author, self.images, self.reviews)

    def average_rating(self):
        """
        Mean rating over all reviews, or None when there are none
        """
        if not self.reviews:
            return None
        return 1.0 * sum(r.rating for r in self.reviews) / len(self.reviews)

    @classmethod
    def from_campground(cls, campground):
        """
        Create instance from tables.Campground
        """
        return cls(campgroundid=campground.campgroundid,
                   title=campground.title,
                   location=campground.location,
                   price=campground.price,
                   description=campground.description,
                   author=UserDetails.from_user(campground.author),
                   images=[ImageDetails.from_image(image)
                           for image in campground.images],
                   reviews=[ReviewDetails.from_review(review)
                            for review in campground.reviews])
