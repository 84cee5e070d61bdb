import logging
import sys

from config_loader import ConfigLoader
from transmission_errors import TransmissionError

USAGE = 'usage: transmission-client [config] stats | add <url> [download_dir]'

logger = logging.getLogger('transmission_client')


def run(client, command, args):
    if command == 'stats':
        stats = client.stats()
        logger.info(f'Stats: {stats}')
        print(stats)
    elif command == 'add' and args:
        name = client.add_torrent(args[0], download_dir=args[1] if len(args) > 1 else None)
        logger.info(f'Added torrent: {name}')
        print(name)
    else:
        print(USAGE, file=sys.stderr)
        return 2
    return 0


def main(argv=None):
    logging.basicConfig(level=logging.INFO)
    argv = sys.argv[1:] if argv is None else argv
    if argv and argv[0] not in ('stats', 'add'):
        config_path, argv = argv[0], argv[1:]
    else:
        config_path = 'transmission-client.conf.example'
    if not argv:
        print(USAGE, file=sys.stderr)
        return 2
    try:
        with ConfigLoader(config_path).build_client() as client:
            return run(client, argv[0], argv[1:])
    except TransmissionError as e:
        logger.error(f'{argv[0]} failed: {type(e).__name__}: {e}')
        return 1


if __name__ == '__main__':
    sys.exit(main())
