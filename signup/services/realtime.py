"""
Real-time Push Service

Socket.IO bridge between the notification channel and connected admin
viewers. Only clients whose session cookie resolves to a logged-in admin may
connect; every published event is emitted to all of them.
"""

import logging

import socketio
from socketio.exceptions import ConnectionRefusedError

logger = logging.getLogger(__name__)

ADMIN_ROOM = 'admins'


class RealtimeBridge:
    """Forwards channel events to the Socket.IO admin room."""

    def __init__(self, app, channel, session_interface):
        self.app = app
        self.session_interface = session_interface
        self.connected = set()

        self.sio = socketio.Server(
            async_mode='threading',
            cors_allowed_origins=app.config['SOCKETIO_CORS_ORIGINS'],
            logger=False,
            engineio_logger=False,
        )
        self.sio.on('connect', self.connect)
        self.sio.on('disconnect', self.disconnect)

        channel.subscribe(self.forward)

        # Socket.IO sits in front of Flask and passes everything else through.
        app.wsgi_app = socketio.WSGIApp(
            self.sio, app.wsgi_app, socketio_path=app.config['SOCKETIO_PATH']
        )

    def connect(self, sid, environ, auth=None):
        data = self.session_interface.load_from_environ(self.app, environ)
        admin = data.get('admin') if data else None
        if not admin:
            logger.info('Socket connection refused: %s', sid)
            raise ConnectionRefusedError('unauthorized')

        self.sio.enter_room(sid, ADMIN_ROOM)
        self.connected.add(sid)
        logger.info('Admin viewer connected: %s (%s)', sid, admin.get('username'))

    def disconnect(self, sid, reason=None):
        self.connected.discard(sid)
        logger.info('Admin viewer disconnected: %s', sid)

    def forward(self, event, payload):
        self.sio.emit(event, payload, to=ADMIN_ROOM)
