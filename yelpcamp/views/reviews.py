"""
Adding and deleting reviews of a campground
"""
from flask import Blueprint, flash, redirect, url_for
from yelpcamp.core.api import API
from yelpcamp.core.dtos import ReviewRequest
from yelpcamp.forms.validation import validate_review
from yelpcamp.views.auth import get_api, validate_with
from yelpcamp.views.campgrounds import missing_campground
from yelpcamp.views.error import check_result

BP = Blueprint('reviews', __name__,
               url_prefix='/campgrounds/<int:campgroundid>/reviews')

@BP.route('', methods=['POST'])
@validate_with(validate_review)
def create(campgroundid, form):
    """
    Add a review to a campground
    """
    request_ = ReviewRequest(body=form.body.data, rating=form.rating.data)
    result = get_api().add_review(campgroundid, request_)
    if result is API.ERR_NO_SUCH_CAMPGROUND:
        return missing_campground()
    check_result(result)
    flash("Created new review!", 'success')
    return redirect(url_for('campgrounds.show', campgroundid=campgroundid))

@BP.route('/<int:reviewid>', methods=['DELETE'])
def delete(campgroundid, reviewid):
    """
    Remove a review from a campground and delete it
    """
    result = get_api().delete_review(campgroundid, reviewid)
    if result is API.ERR_NO_SUCH_CAMPGROUND:
        return missing_campground()
    if result is API.ERR_NO_SUCH_REVIEW:
        flash(str(result), 'error')
        return redirect(url_for('campgrounds.show',
                                campgroundid=campgroundid))
    check_result(result)
    flash("Successfully deleted review", 'success')
    return redirect(url_for('campgrounds.show', campgroundid=campgroundid))
