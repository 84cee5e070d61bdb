import json
import logging
from urllib.parse import urlparse

import requests

from tls_policy import TlsPolicy
from transmission_errors import EncodingError, InvalidEndpoint, SessionError, TransportError

SESSION_HEADER = 'X-Transmission-Session-Id'
DEFAULT_RPC_PATH = '/transmission/rpc'
CONNECT_TIMEOUT = 5
DEFAULT_READ_TIMEOUT = 30

logger = logging.getLogger('transmission_client')


class Connection:
    """
    A Transmission endpoint plus the HTTP session used to talk to it.

    Holds no session token: every RPC call probes for a fresh one.
    """

    def __init__(self, url, session, rpc_path=DEFAULT_RPC_PATH,
                 connect_timeout=CONNECT_TIMEOUT, read_timeout=DEFAULT_READ_TIMEOUT):
        self.url = url.rstrip('/')
        self.rpc_url = f'{self.url}{rpc_path}'
        self.session = session
        # requests takes (connect, read); a None read timeout waits forever
        self.timeout = (connect_timeout, read_timeout)

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def connect(endpoint, tls_policy=None, username=None, password=None, rpc_path=DEFAULT_RPC_PATH,
            connect_timeout=CONNECT_TIMEOUT, read_timeout=DEFAULT_READ_TIMEOUT):
    try:
        parsed = urlparse(endpoint)
        parsed.port  # raises ValueError on a bad port
    except (TypeError, ValueError, AttributeError) as e:
        raise InvalidEndpoint(f'invalid endpoint {endpoint!r}: {e}') from e
    if parsed.scheme not in ('http', 'https') or not parsed.hostname:
        raise InvalidEndpoint(f'invalid endpoint {endpoint!r}: expected http(s)://host[:port]')

    tls = (tls_policy or TlsPolicy()).config_for(parsed.hostname)
    session = requests.Session()
    session.verify = tls.verify
    if tls.cert:
        session.cert = tls.cert
    if username and password:
        session.auth = (username, password)
    return Connection(endpoint, session, rpc_path=rpc_path,
                      connect_timeout=connect_timeout, read_timeout=read_timeout)


def fetch_session_token(connection):
    """
    Probe the RPC path with a bare GET. The daemon refuses it and hands out
    the current session id in a response header, which is returned as is.
    """
    logger.debug(f'Probing {connection.rpc_url} for a session id')
    try:
        resp = connection.session.get(connection.rpc_url, timeout=connection.timeout)
    except requests.RequestException as e:
        raise TransportError(f'session probe to {connection.rpc_url} failed: {e}') from e
    token = resp.headers.get(SESSION_HEADER)
    if not token:
        raise SessionError('missing token')
    return token


def call(connection, method, arguments=None):
    """Send one RPC request and return the raw response body."""
    token = fetch_session_token(connection)
    request = {'method': method}
    if arguments is not None:
        request['arguments'] = arguments
    try:
        body = json.dumps(request)
    except (TypeError, ValueError) as e:
        raise EncodingError(f'cannot encode {method} request: {e}') from e

    headers = {SESSION_HEADER: token, 'Content-Type': 'application/json'}
    logger.debug(f'Calling {method} on {connection.rpc_url}')
    try:
        resp = connection.session.post(connection.rpc_url, data=body.encode('utf-8'),
                                       headers=headers, timeout=connection.timeout)
    except requests.RequestException as e:
        raise TransportError(f'{method} call to {connection.rpc_url} failed: {e}') from e
    if resp.status_code == 409:
        raise SessionError('session rejected')
    return resp.content
