"""
Tests for the admin console commands.
"""
import io
from yelpcamp.core.admin import AdminCmd

def run(api, *lines):
    out = io.StringIO()
    cmd = AdminCmd(api, stdout=out)
    for line in lines:
        cmd.onecmd(line)
    return out.getvalue()

def test_register_and_list_users(api):
    output = run(api, 'register colt colt@yelpcamp.dev monkey', 'users')
    assert "Created user" in output
    assert "1: colt <colt@yelpcamp.dev>" in output

def test_register_bad_syntax(api):
    assert "Need exactly 3 parameters." in run(api, 'register colt')

def test_register_duplicate(api):
    output = run(api, 'register colt colt@yelpcamp.dev monkey',
                 'register colt other@yelpcamp.dev monkey')
    assert "Error: A user with the given username is already registered"  \
        in output

def test_seed_replaces_campgrounds(api):
    assert "Seeded 5 campgrounds" in run(api, 'seed 5')
    assert "Seeded 3 campgrounds" in run(api, 'seed 3')
    campgrounds = api.get_campgrounds()
    assert len(campgrounds) == 3
    assert all(c.author.username == 'seed' for c in campgrounds)
    assert all(len(c.images) == 1 for c in campgrounds)
    listing = run(api, 'campgrounds')
    assert len(listing.splitlines()) == 3
    assert "(by seed, 0 reviews)" in listing

def test_seed_bad_syntax(api):
    assert "Bad syntax" in run(api, 'seed lots')
    assert api.get_campgrounds() == []

def test_deletedb_then_createdb(api, make_user):
    make_user()
    output = run(api, 'deletedb', 'createdb')
    assert "Database deleted" in output
    assert "Database created" in output
    assert api.get_users() == []
