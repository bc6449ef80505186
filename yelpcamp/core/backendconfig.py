"""
Backend configuration settings, for the command line tools
"""
import configparser

# Note: we must not log any of this,
# because logging has not been configured yet,
# because logging setup requires these settings

# Don't like these defaults? Override them with a config file called server.cfg
# that looks this:
#
# [database]
# uri=sqlite:///yelpcamp.db
#
# [debug]
# level=10

PARSER = configparser.ConfigParser()
PARSER.read("server.cfg")

DATABASE_URI = PARSER.get("database", "uri", fallback=None)

DEBUG_LEVEL = PARSER.getint("debug", "level", fallback=10)

def app_config():
    """
    Flask config overrides implied by server.cfg
    """
    if DATABASE_URI is None:
        return {}
    return {'SQLALCHEMY_DATABASE_URI': DATABASE_URI}
