"""
Registration, login and logout
"""
import logging
from flask import Blueprint, flash, redirect, render_template, request,  \
    session, url_for
from yelpcamp.core.api import API, APIError
from yelpcamp.core.dtos import RegisterRequest
from yelpcamp.forms.login import LoginForm
from yelpcamp.forms.register import RegisterForm
from yelpcamp.forms.validation import violations_of
from yelpcamp.infrastructure.util import is_safe_redirect
from yelpcamp.views.auth import get_api, log_in, log_out

BP = Blueprint('users', __name__)

def flash_violations(form):
    """
    Flash every problem with a submitted form as one message
    """
    flash(", ".join(str(v) for v in violations_of(form)), 'error')

@BP.route('/register', methods=['GET', 'POST'])
def register():
    """
    Create an account and log straight in. Any failure comes back here with a
    message.
    """
    form = RegisterForm()
    if request.method == 'GET':
        return render_template('users/register.html', title="Register",
            form=form)
    if not form.validate():
        flash_violations(form)
        return redirect(url_for('users.register'))
    result = get_api().register(RegisterRequest(username=form.username.data,
                                                email=form.email.data,
                                                password=form.password.data))
    if result is API.ERR_UNKNOWN:
        flash("An unknown error occurred registering you, sorry.", 'error')
        return redirect(url_for('users.register'))
    if isinstance(result, APIError):
        flash(str(result), 'error')
        return redirect(url_for('users.register'))
    log_in(result)
    logging.debug("Registered and logged in %r", result)
    flash("Welcome to YelpCamp!", 'success')
    return redirect(url_for('campgrounds.index'))

@BP.route('/login', methods=['GET', 'POST'])
def login():
    """
    Log user in and redirect to where they were going, if anywhere
    """
    form = LoginForm()
    if request.method == 'GET':
        return render_template('users/login.html', title="Login", form=form)
    if not form.validate():
        flash_violations(form)
        return redirect(url_for('users.login'))
    result = get_api().authenticate(form.username.data, form.password.data)
    if result is API.ERR_BAD_CREDENTIALS:
        flash(str(result), 'error')
        return redirect(url_for('users.login'))
    if isinstance(result, APIError):
        flash("An unknown error occurred logging you in, sorry.", 'error')
        return redirect(url_for('users.login'))
    return_to = session.pop('return_to', None)
    log_in(result)
    flash("Welcome back!", 'success')
    if is_safe_redirect(return_to, request.url):
        return redirect(return_to)
    return redirect(url_for('campgrounds.index'))

@BP.route('/logout', methods=['GET'])
def logout():
    """
    Explicit logout
    """
    log_out()
    flash("Goodbye!", 'success')
    return redirect(url_for('campgrounds.index'))
