"""
Form for registration page
"""
from flask_wtf import FlaskForm
from wtforms.fields import StringField, PasswordField, EmailField,  \
    SubmitField
from wtforms.validators import DataRequired, Email, Length
from yelpcamp.db.tables import MAX_USERNAME, MAX_EMAIL

class RegisterForm(FlaskForm):  # pylint:disable=R0903
    """
    User chooses a username and password, and gives their email address.
    """
    username = StringField(label="Username",
        validators=[DataRequired(), Length(max=MAX_USERNAME)])
    email = EmailField(label="Email",
        validators=[DataRequired(), Email(), Length(max=MAX_EMAIL)])
    password = PasswordField(label="Password", validators=[DataRequired()])
    submit = SubmitField(label="Register")
