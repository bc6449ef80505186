"""
Form for leaving a review
"""
from flask_wtf import FlaskForm
from wtforms.fields import IntegerField, TextAreaField, SubmitField
from wtforms.validators import DataRequired, InputRequired, NumberRange

MIN_RATING = 1
MAX_RATING = 5

PREFIX = 'review'

class ReviewForm(FlaskForm):  # pylint:disable=R0903
    """
    User rates a campground and comments on it.
    """
    rating = IntegerField(label="Rating",
        validators=[InputRequired(),
                    NumberRange(min=MIN_RATING, max=MAX_RATING)],
        render_kw={'min': MIN_RATING, 'max': MAX_RATING})
    body = TextAreaField(label="Review", validators=[DataRequired()])
    submit = SubmitField(label="Submit review")

def review_form():
    """
    Returns a ReviewForm under the 'review' prefix
    """
    return ReviewForm(prefix=PREFIX)
