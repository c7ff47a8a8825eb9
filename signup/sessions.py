"""
Server-side Sessions

The session cookie carries only an opaque random token; the session data lives
in a pluggable SessionStore. Sessions expire after SESSION_LIFETIME seconds
without a request.
"""

import logging
import secrets
import threading
import time

from flask.sessions import SessionInterface, SessionMixin
from werkzeug.datastructures import CallbackDict
from werkzeug.http import parse_cookie

logger = logging.getLogger(__name__)


def new_token():
    return secrets.token_urlsafe(32)


class SessionStore:
    """Interface for session storage keyed by token."""

    def load(self, token):
        """Return the session data for `token`, or None if absent or expired."""
        raise NotImplementedError

    def save(self, token, data, lifetime):
        """Store `data` under `token` for `lifetime` seconds."""
        raise NotImplementedError

    def delete(self, token):
        raise NotImplementedError

    def purge_expired(self):
        """Drop expired sessions; stores with native expiry need not override."""
        return 0


class MemorySessionStore(SessionStore):
    """Process-local store; every session is lost on restart."""

    def __init__(self, clock=time.monotonic, purge_interval=60):
        self._clock = clock
        self._purge_interval = purge_interval
        self._next_purge = None
        self._sessions = {}
        self._lock = threading.Lock()

    def load(self, token):
        with self._lock:
            entry = self._sessions.get(token)
            if entry is None:
                return None
            data, expires_at = entry
            if self._clock() >= expires_at:
                del self._sessions[token]
                logger.debug('Session expired')
                return None
            return dict(data)

    def save(self, token, data, lifetime):
        with self._lock:
            self._sessions[token] = (dict(data), self._clock() + lifetime)

    def delete(self, token):
        with self._lock:
            self._sessions.pop(token, None)

    def purge_expired(self):
        """Drop every expired session and return how many were removed.

        Runs at most once per purge_interval seconds.
        """
        now = self._clock()
        with self._lock:
            if self._next_purge is not None and now < self._next_purge:
                return 0
            self._next_purge = now + self._purge_interval
            expired = [t for t, (_, expires_at) in self._sessions.items() if now >= expires_at]
            for token in expired:
                del self._sessions[token]
        return len(expired)

    def __len__(self):
        return len(self._sessions)


class ServerSideSession(CallbackDict, SessionMixin):
    """Session dict that remembers its token and whether it was modified."""

    def __init__(self, initial=None, token=None, new=False):
        def on_update(self):
            self.modified = True

        CallbackDict.__init__(self, initial, on_update)
        self.token = token or new_token()
        self.new = new
        self.modified = False
        self.stale_token = None

    def regenerate(self):
        """Move the data to a fresh token (call on privilege change)."""
        self.stale_token = self.token
        self.token = new_token()
        self.modified = True


class ServerSideSessionInterface(SessionInterface):
    """Flask session interface backed by a SessionStore."""

    def __init__(self, store):
        self.store = store

    def open_session(self, app, request):
        self.store.purge_expired()
        token = request.cookies.get(self.get_cookie_name(app))
        if token:
            data = self.store.load(token)
            if data is not None:
                return ServerSideSession(data, token=token)
        return ServerSideSession(new=True)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if session.stale_token:
            self.store.delete(session.stale_token)

        if not session:
            if session.modified:
                self.store.delete(session.token)
                response.delete_cookie(name, domain=domain, path=path)
            return

        # Saved on every request: expiry slides with activity.
        self.store.save(session.token, dict(session), app.config['SESSION_LIFETIME'])
        response.set_cookie(
            name,
            session.token,
            max_age=app.config['SESSION_LIFETIME'],
            httponly=self.get_cookie_httponly(app),
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
            domain=domain,
            path=path,
        )

    def load_from_environ(self, app, environ):
        """Resolve the session for a raw WSGI environ (Socket.IO handshakes)."""
        token = parse_cookie(environ).get(self.get_cookie_name(app))
        if not token:
            return None
        return self.store.load(token)
