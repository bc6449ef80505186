"""
Form for campground creation and edit pages
"""
from flask_wtf import FlaskForm
from flask_wtf.file import FileAllowed, MultipleFileField
from wtforms.fields import StringField, TextAreaField, DecimalField,  \
    SubmitField
from wtforms.validators import DataRequired, InputRequired, Length,  \
    NumberRange, Optional, URL
from yelpcamp.db.tables import MAX_TITLE, MAX_LOCATION, MAX_URL

IMAGE_EXTENSIONS = ['jpg', 'jpeg', 'png', 'gif', 'webp']

PREFIX = 'campground'

class CampgroundForm(FlaskForm):  # pylint:disable=R0903
    """
    User describes a campground.
    """
    title = StringField(label="Title",
        validators=[DataRequired(), Length(max=MAX_TITLE)])
    location = StringField(label="Location",
        validators=[DataRequired(), Length(max=MAX_LOCATION)])
    price = DecimalField(label="Campground price", places=2,
        validators=[InputRequired(), NumberRange(min=0)])
    description = TextAreaField(label="Description",
        validators=[DataRequired()])
    image = StringField(label="Image URL",
        validators=[Optional(), URL(), Length(max=MAX_URL)])
    uploads = MultipleFileField(label="Upload images",
        validators=[FileAllowed(IMAGE_EXTENSIONS, "Images only!")])
    submit = SubmitField(label="Save campground")

def campground_form(campground=None):
    """
    Returns a CampgroundForm under the 'campground' prefix, prefilled from
    campground (a CampgroundDetails) when one is given.
    """
    return CampgroundForm(prefix=PREFIX, obj=campground)
