"""
Admin Cmd class for interacting with API
"""
from cmd import Cmd
import secrets
from yelpcamp.core.api import APIError, API
from yelpcamp.core.dtos import RegisterRequest
from yelpcamp.core.seeds import seed_requests

#pylint:disable=R0201,R0904,unused-argument

SEED_USERNAME = 'seed'
SEED_EMAIL = 'seed@yelpcamp.dev'
DEFAULT_SEED_COUNT = 50

class AdminCmd(Cmd):
    """
    Cmd class to make calls to an API instance
    """
    def __init__(self, api, stdout=None):
        Cmd.__init__(self, stdout=stdout)
        self.api = api

    def say(self, *parts):
        """
        Print to this Cmd's output
        """
        self.stdout.write(" ".join(str(part) for part in parts) + "\n")

    def do_createdb(self, _details):
        """
        Create the database
        """
        result = self.api.create_db()
        if result:
            self.say("Error:", result)
        else:
            self.say("Database created")

    def do_deletedb(self, _details):
        """
        Delete the database, and everything in it
        """
        result = self.api.delete_db()
        if result:
            self.say("Error:", result)
        else:
            self.say("Database deleted")

    def do_register(self, params):
        """
        register <username> <email> <password>
        creates a user
        """
        params = params.split()
        if len(params) != 3:
            self.say("Need exactly 3 parameters.")
            self.say("For more info, help register")
            return
        result = self.api.register(RegisterRequest(*params))
        if isinstance(result, APIError):
            self.say("Error:", result)
            return
        self.say("Created user %r" % (result,))

    def do_users(self, _details):
        """
        Display all users
        """
        result = self.api.get_users()
        if isinstance(result, APIError):
            self.say("Error:", result)
            return
        for user in result:
            self.say("%d: %s <%s>" % (user.userid, user.username, user.email))

    def do_campgrounds(self, _details):
        """
        Display all campgrounds
        """
        result = self.api.get_campgrounds()
        if isinstance(result, APIError):
            self.say("Error:", result)
            return
        for campground in result:
            self.say("%d: %s, %s (by %s, %d reviews)" %
                (campground.campgroundid, campground.title,
                 campground.location, campground.author.username,
                 len(campground.reviews)))

    def _seed_user(self):
        """
        The user who owns seeded campgrounds, created if need be
        """
        result = self.api.get_user_by_username(SEED_USERNAME)
        if result is not API.ERR_NO_SUCH_USER:
            return result
        return self.api.register(RegisterRequest(SEED_USERNAME, SEED_EMAIL,
                                                 secrets.token_urlsafe(16)))

    def do_seed(self, details):
        """
        seed [count]

        Deletes all campgrounds, and creates count (default 50) random ones
        owned by the 'seed' user.
        """
        try:
            count = int(details) if details.strip() else DEFAULT_SEED_COUNT
        except ValueError:
            self.say("Bad syntax. See 'help seed'.")
            return
        user = self._seed_user()
        if isinstance(user, APIError):
            self.say("Error:", user)
            return
        result = self.api.reseed(user.userid, seed_requests(count))
        if isinstance(result, APIError):
            self.say("Error:", result)
            return
        self.say("Seeded %d campgrounds" % (result,))

    def do_exit(self, _details):
        """
        Leave the admin tool
        """
        return True

    do_EOF = do_exit  # pylint:disable=invalid-name
