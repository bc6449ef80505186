"""
Defines the error page, used for every error the site reports
"""
import logging
from flask import render_template
from werkzeug.exceptions import HTTPException
from yelpcamp.core.api import APIError

GENERIC_MESSAGE = "Something Went Wrong!"
NOT_FOUND_MESSAGE = "Page Not Found"

class AppError(Exception):
    """
    An error to be shown to the user on the error page, with an HTTP status.
    """
    def __init__(self, message=None, status_code=500):
        Exception.__init__(self, message or GENERIC_MESSAGE)
        self.message = message or GENERIC_MESSAGE
        self.status_code = status_code

class ValidationFailed(AppError):
    """
    A submission broke one or more validation rules. The message lists them
    all; violations keeps them field by field.
    """
    def __init__(self, violations):
        AppError.__init__(self, ",".join(str(v) for v in violations), 400)
        self.violations = violations

def check_result(result):
    """
    Raise an APIError result as an AppError, otherwise return it.

    Used for results where the only expected APIError is ERR_UNKNOWN.
    """
    if isinstance(result, APIError):
        logging.debug("Unexpected API error: %s", result)
        raise AppError(GENERIC_MESSAGE, 500)
    return result

def render_error(message, status_code):
    """
    Render the error page with the given HTTP status
    """
    return render_template('error.html', title="Oh no!",
        message=message, status_code=status_code), status_code

def handle_app_error(err):
    """
    AppError and its subclasses
    """
    return render_error(err.message, err.status_code)

def handle_http_exception(err):
    """
    Routing errors like 404 and 405, and aborts from Flask or plugins
    """
    if err.code == 404:
        return render_error(NOT_FOUND_MESSAGE, 404)
    return render_error(err.description or GENERIC_MESSAGE, err.code or 500)

def handle_unexpected(err):
    """
    Anything else is a bug
    """
    logging.exception("Unhandled exception: %r", err)
    return render_error(GENERIC_MESSAGE, 500)

def register_error_handlers(app):
    """
    Route every error to the error page
    """
    app.register_error_handler(AppError, handle_app_error)
    app.register_error_handler(HTTPException, handle_http_exception)
    app.register_error_handler(Exception, handle_unexpected)
