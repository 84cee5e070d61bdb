import json
from dataclasses import dataclass

from transmission_errors import DecodingError, OperationError


@dataclass
class Statistics:
    download_speed: int = 0
    upload_speed: int = 0
    torrent_count: int = 0
    active_torrent_count: int = 0
    paused_torrent_count: int = 0

    def __str__(self):
        return (f'{self.download_speed // 1024} KB/s DL, {self.upload_speed // 1024} KB/s UL, '
                f'{self.torrent_count} torrents ({self.active_torrent_count} active, '
                f'{self.paused_torrent_count} paused)')

    @classmethod
    def from_arguments(cls, arguments):
        return cls(
            download_speed=_get_int(arguments, 'DownloadSpeed'),
            upload_speed=_get_int(arguments, 'UploadSpeed'),
            torrent_count=_get_int(arguments, 'TorrentCount'),
            active_torrent_count=_get_int(arguments, 'ActiveTorrentCount'),
            paused_torrent_count=_get_int(arguments, 'PausedTorrentCount'),
        )


@dataclass
class AddedTorrent:
    id: int = 0
    name: str = ''
    hash_string: str = ''

    @classmethod
    def from_arguments(cls, arguments):
        added = _get(arguments, 'torrent-added') or {}
        if not isinstance(added, dict):
            raise DecodingError(f'torrent-added is not an object: {added!r}')
        return cls(
            id=_get_int(added, 'Id'),
            name=_get_str(added, 'Name'),
            hash_string=_get_str(added, 'HashString'),
        )


def decode_envelope(body):
    """
    Parse a response body and return its ``arguments`` object.

    Raises DecodingError if the body is not an RPC envelope and
    OperationError if the daemon did not report success.
    """
    try:
        envelope = json.loads(body)
    except (TypeError, ValueError) as e:
        raise DecodingError(f'response is not valid JSON: {e}') from e
    if not isinstance(envelope, dict):
        raise DecodingError(f'response is not a JSON object: {envelope!r}')

    result = _get_str(envelope, 'result')
    if result != 'success':
        raise OperationError(result)
    arguments = _get(envelope, 'arguments') or {}
    if not isinstance(arguments, dict):
        raise DecodingError(f'arguments is not an object: {arguments!r}')
    return arguments


# The daemon sends camelCase keys ("downloadSpeed"); match them case-insensitively.
def _get(mapping, key):
    if key in mapping:
        return mapping[key]
    lowered = key.lower()
    for name, value in mapping.items():
        if name.lower() == lowered:
            return value
    return None


def _get_int(mapping, key):
    value = _get(mapping, key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodingError(f'{key} is not an integer: {value!r}')
    return value


def _get_str(mapping, key):
    value = _get(mapping, key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise DecodingError(f'{key} is not a string: {value!r}')
    return value
