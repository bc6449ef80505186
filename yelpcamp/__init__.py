"""
Package for the YelpCamp web application, to be run by run.py

Site outline (user view)

1. Landing page.
Describes the site. Links to the campground list.

2. Campground list.
Shows every campground with its first image, location and a link to its
detail page. Logged-in users get a link to the creation form.

3. Campground detail page.
Shows the campground, its images, its author and its reviews. The author gets
edit and delete buttons. Anyone can leave a review, and anyone can delete one.

4. Creation and edit forms.
Only for logged-in users. Only the author can edit or delete a campground;
anyone else is sent back to the detail page with a message.

5. Register, login, logout.
Username and password. A user who was sent to the login page from a protected
page is returned to that page after logging in.

What core has to do:
- register a user, check a user's password
- list campgrounds, retrieve one campground with its reviews and author
- create, update and delete a campground
- tell who authored a campground
- add a review to a campground, delete a review from a campground
"""
