"""
Creation of database engines, sessions for use of database
"""
from contextlib import contextmanager
from functools import wraps
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

BASE = declarative_base()

IN_MEMORY_URIS = ('sqlite://', 'sqlite:///:memory:')

def make_engine(uri):
    """
    Create an engine for the given database URI.

    An in-memory SQLite database lives in one connection, so every session
    must share it.
    """
    kwargs = {}
    if uri.startswith('sqlite'):
        kwargs['connect_args'] = {'check_same_thread': False}
        if uri in IN_MEMORY_URIS:
            kwargs['poolclass'] = StaticPool
    engine = create_engine(uri, echo=False, **kwargs)
    if uri.startswith('sqlite'):
        @event.listens_for(engine, "connect")
        def do_connect(dbapi_connection, _connection_record):
            """
            SQLite only enforces foreign keys when asked to
            """
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
    return engine

# from http://docs.sqlalchemy.org/en/rel_0_8/orm/session.html
@contextmanager
def session_scope(session_factory):
    """Provide a transactional scope around a series of operations."""
    session = session_factory()
    try:
        yield session
        session.commit()
    except BaseException:
        session.rollback()
        raise
    finally:
        session.close()

def create_session(fun):
    """
    Creates a session_scope() for session and assigns it to the parent object,
    setting it back to None after the call.

    The parent object must have 'session' and 'session_factory' attributes.
    """
    @wraps(fun)
    def inner(*args, **kwargs):
        """
        See parent.
        """
        self = args[0]
        if self.session is None:
            with session_scope(self.session_factory) as session:
                self.session = session
                try:
                    return fun(*args, **kwargs)
                finally:
                    self.session = None
        else:
            return fun(*args, **kwargs)
    return inner
