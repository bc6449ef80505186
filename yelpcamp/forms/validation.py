"""
Validation of submitted campgrounds and reviews.

Each validator builds its form from the current request and returns the form
together with a list of Violation. An empty list means the submission is
valid.
"""
from collections import namedtuple
from yelpcamp.forms.campground import campground_form
from yelpcamp.forms.review import review_form

class Violation(namedtuple('Violation', ['field', 'message'])):
    """
    One problem with one field of a submission
    """
    __slots__ = ()

    def __str__(self):
        return "%s: %s" % (self.field, self.message)

def violations_of(form):
    """
    List a validated form's errors as Violations, in field order.
    """
    violations = []
    for name, field in form._fields.items():  # pylint:disable=W0212
        for message in field.errors:
            violations.append(Violation(name, message))
    return violations

def _validate(form):
    """
    Validate form, return (form, violations)
    """
    form.validate()
    return form, violations_of(form)

def validate_campground():
    """
    Validate a submitted campground
    """
    return _validate(campground_form())

def validate_review():
    """
    Validate a submitted review
    """
    return _validate(review_form())
