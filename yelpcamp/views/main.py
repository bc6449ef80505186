"""
The landing page, and uploaded images
"""
from flask import Blueprint, current_app, render_template,  \
    send_from_directory

BP = Blueprint('main', __name__)

@BP.route('/', methods=['GET'])
def home_page():
    """
    Unauthenticated landing page.
    """
    return render_template('home.html', title="YelpCamp")

@BP.route('/uploads/<path:filename>', methods=['GET'])
def uploaded_file(filename):
    """
    An image uploaded with a campground
    """
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
