import yaml

from tls_policy import TlsPolicy
from transmission_client import TransmissionClient
from transmission_connection import CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT, DEFAULT_RPC_PATH


class ConfigLoader:
    def __init__(self, config_path):
        self.config_path = config_path
        self.config = self.load_config()

    def load_config(self):
        with open(self.config_path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def get_option(self, key, default=None):
        return self.config.get(key, default)

    def get_endpoint(self):
        endpoint = self.get_option('endpoint')
        if endpoint:
            return endpoint
        server = self.get_option('server', {})
        scheme = server.get('scheme', 'http')
        return f"{scheme}://{server.get('host', 'localhost')}:{server.get('port', 9091)}"

    def build_client(self):
        server = self.get_option('server', {})
        login = self.get_option('login', {})
        client_opts = self.get_option('client', {})
        return TransmissionClient(
            endpoint=self.get_endpoint(),
            rpc_path=server.get('rpc_path', DEFAULT_RPC_PATH),
            username=login.get('username'),
            password=login.get('password'),
            timeout=client_opts.get('timeout', CONNECT_TIMEOUT),
            read_timeout=client_opts.get('read_timeout', DEFAULT_READ_TIMEOUT),
            tls_policy=TlsPolicy.from_options(self.get_option('tls', {})),
        )
