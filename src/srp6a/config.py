import os
from .errors import MissingServerSecret

SERVER_SECRET_ENV = "SRP_AUTH_SECRET"

def server_secret_from_env(name=SERVER_SECRET_ENV, environ=None):
    """Return the server-wide secret used to derive fake credentials for
    unknown identities. It must be stable across restarts, or probing the
    same unknown identity twice would give different salts."""
    if environ is None:
        environ = os.environ
    value = environ.get(name, "")
    if not value:
        raise MissingServerSecret("environment variable %s is not set" % name)
    return value
