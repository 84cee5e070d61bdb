import logging

from transmission_connection import (
    CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_RPC_PATH,
    call,
    connect,
)
from transmission_errors import OperationError
from transmission_models import AddedTorrent, Statistics, decode_envelope

logger = logging.getLogger('transmission_client')


class TransmissionClient:
    def __init__(self, endpoint='http://localhost:9091', rpc_path=DEFAULT_RPC_PATH, username=None,
                 password=None, timeout=CONNECT_TIMEOUT, read_timeout=DEFAULT_READ_TIMEOUT, tls_policy=None):
        self.connection = connect(
            endpoint,
            tls_policy=tls_policy,
            username=username,
            password=password,
            rpc_path=rpc_path,
            connect_timeout=timeout,
            read_timeout=read_timeout,
        )
        self.url = self.connection.rpc_url

    def call(self, method, arguments=None):
        """Run any RPC method and return the ``arguments`` of a successful reply."""
        return decode_envelope(call(self.connection, method, arguments))

    def stats(self):
        """Current speeds and torrent counts."""
        return Statistics.from_arguments(self.call('session-stats'))

    def add_torrent_details(self, torrent_url, download_dir=None):
        arguments = {'paused': False, 'filename': torrent_url}
        if download_dir:
            arguments['download-dir'] = download_dir
        added = AddedTorrent.from_arguments(self.call('torrent-add', arguments))
        # the daemon can answer success without adding anything (e.g. duplicates)
        if not added.name:
            raise OperationError('empty result')
        logger.debug(f'Added torrent {added.name} (id {added.id}, hash {added.hash_string})')
        return added

    def add_torrent(self, torrent_url, download_dir=None):
        """Add a torrent by magnet link or URL and return its name."""
        return self.add_torrent_details(torrent_url, download_dir=download_dir).name

    def close(self):
        self.connection.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
