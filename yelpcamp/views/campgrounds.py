"""
The campground pages: list, detail, create, edit, delete
"""
import logging
import os
import uuid
from flask import Blueprint, current_app, flash, redirect, render_template,  \
    session, url_for
from werkzeug.utils import secure_filename
from yelpcamp.core.api import API, APIError
from yelpcamp.core.dtos import CampgroundRequest, ImageDetails
from yelpcamp.forms.campground import campground_form
from yelpcamp.forms.review import review_form
from yelpcamp.forms.validation import validate_campground
from yelpcamp.views.auth import get_api, login_required, author_required,  \
    validate_with, log_out
from yelpcamp.views.error import check_result

BP = Blueprint('campgrounds', __name__, url_prefix='/campgrounds')

def save_uploads(form):
    """
    Save uploaded images to the upload folder under unique names, and return
    ImageDetails for them, plus one for the image URL if given.
    """
    images = []
    if form.image.data:
        images.append(ImageDetails(form.image.data))
    folder = current_app.config['UPLOAD_FOLDER']
    for storage in form.uploads.data or []:
        if not storage or not storage.filename:
            continue
        filename = "%s-%s" % (uuid.uuid4().hex,
                              secure_filename(storage.filename))
        os.makedirs(folder, exist_ok=True)
        storage.save(os.path.join(folder, filename))
        logging.debug("Saved upload '%s' as '%s'", storage.filename, filename)
        images.append(ImageDetails(
            url_for('main.uploaded_file', filename=filename), filename))
    return images

def remove_uploads(filenames):
    """
    Delete uploaded images from the upload folder
    """
    folder = current_app.config['UPLOAD_FOLDER']
    for filename in filenames:
        try:
            os.remove(os.path.join(folder, filename))
        except FileNotFoundError:
            logging.info("Upload '%s' was already gone", filename)

def campground_request(form, images):
    """
    CampgroundRequest from a validated CampgroundForm
    """
    return CampgroundRequest(title=form.title.data,
                             location=form.location.data,
                             price=form.price.data,
                             description=form.description.data,
                             images=images)

def missing_campground():
    """
    Flash the not-found message and go back to the list
    """
    flash(str(API.ERR_NO_SUCH_CAMPGROUND), 'error')
    return redirect(url_for('campgrounds.index'))

@BP.route('', methods=['GET'])
def index():
    """
    All campgrounds
    """
    campgrounds = check_result(get_api().get_campgrounds())
    return render_template('campgrounds/index.html', title="All Campgrounds",
        campgrounds=campgrounds)

@BP.route('/new', methods=['GET'])
@login_required
def new():
    """
    Form for a new campground
    """
    return render_template('campgrounds/new.html', title="New Campground",
        form=campground_form())

@BP.route('', methods=['POST'])
@login_required
@validate_with(validate_campground)
def create(form):
    """
    Create a campground authored by the logged in user
    """
    images = save_uploads(form)
    result = get_api().create_campground(session['userid'],
                                         campground_request(form, images))
    if isinstance(result, APIError):
        remove_uploads([image.filename for image in images
                        if image.filename])
    if result is API.ERR_NO_SUCH_USER:
        # e.g. the account was deleted from the console
        log_out()
        flash("Your account no longer exists. Please register again.",
              'error')
        return redirect(url_for('users.register'))
    campground = check_result(result)
    flash("Successfully made a new campground!", 'success')
    return redirect(url_for('campgrounds.show',
                            campgroundid=campground.campgroundid))

@BP.route('/<int:campgroundid>', methods=['GET'])
def show(campgroundid):
    """
    One campground, with its author and reviews
    """
    result = get_api().get_campground(campgroundid)
    if result is API.ERR_NO_SUCH_CAMPGROUND:
        return missing_campground()
    campground = check_result(result)
    return render_template('campgrounds/show.html', title=campground.title,
        campground=campground, review_form=review_form(),
        is_author=campground.author.userid == session.get('userid'))

@BP.route('/<int:campgroundid>/edit', methods=['GET'])
@login_required
@author_required
def edit(campgroundid):
    """
    Form for editing a campground, prefilled
    """
    result = get_api().get_campground(campgroundid)
    if result is API.ERR_NO_SUCH_CAMPGROUND:
        return missing_campground()
    campground = check_result(result)
    return render_template('campgrounds/edit.html', title="Edit Campground",
        campground=campground, form=campground_form(campground))

@BP.route('/<int:campgroundid>', methods=['PUT'])
@author_required
@validate_with(validate_campground)
def update(campgroundid, form):
    """
    Overwrite a campground's fields, and add any new images
    """
    images = save_uploads(form)
    result = get_api().update_campground(campgroundid,
                                         campground_request(form, images))
    if isinstance(result, APIError):
        remove_uploads([image.filename for image in images
                        if image.filename])
    if result is API.ERR_NO_SUCH_CAMPGROUND:
        return missing_campground()
    campground = check_result(result)
    flash("Successfully updated campground!", 'success')
    return redirect(url_for('campgrounds.show',
                            campgroundid=campground.campgroundid))

@BP.route('/<int:campgroundid>', methods=['DELETE'])
@author_required
def delete(campgroundid):
    """
    Delete a campground and its reviews
    """
    result = get_api().delete_campground(campgroundid)
    if result is API.ERR_NO_SUCH_CAMPGROUND:
        return missing_campground()
    remove_uploads(check_result(result))
    flash("Successfully deleted campground", 'success')
    return redirect(url_for('campgrounds.index'))
