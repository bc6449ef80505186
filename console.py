"""
Runs an AdminCmd.

Run this directly from your yelpcamp clone folder, e.g.:

python console.py createdb
python console.py seed 20

or with no arguments for an interactive prompt.
"""
import logging
import sys
from yelpcamp.app import create_app
from yelpcamp.core import backendconfig
from yelpcamp.core.admin import AdminCmd

logging.basicConfig(format="%(asctime)s: %(message)s",
                    datefmt='%Y-%m-%d %H:%M:%S')
logging.root.setLevel(backendconfig.DEBUG_LEVEL)

APP = create_app(backendconfig.app_config())

with APP.app_context():
    CMD = AdminCmd(APP.extensions['yelpcamp']())

    CMDLINE = " ".join(sys.argv[1:])
    if CMDLINE:
        CMD.onecmd(CMDLINE)
    else:
        CMD.prompt = "> "
        CMD.cmdloop("YelpCamp admin tool. Type ? for help.")
