from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class TlsConfig:
    verify: Union[bool, str] = True
    cert: Optional[str] = None


class TlsPolicy:
    """Hands out TLS settings per hostname, falling back to a default."""

    def __init__(self, default=None, hosts=None):
        self.default = default or TlsConfig()
        self.hosts = {host.lower(): config for host, config in (hosts or {}).items()}

    def config_for(self, hostname):
        if not hostname:
            return self.default
        return self.hosts.get(hostname.lower(), self.default)

    @classmethod
    def from_options(cls, options):
        # options: {'verify': bool, 'ca_bundle': path, 'cert': path, 'hosts': {host: {...}}}
        options = options or {}
        hosts = {host: cls._parse_entry(entry or {}) for host, entry in (options.get('hosts') or {}).items()}
        return cls(default=cls._parse_entry(options), hosts=hosts)

    @staticmethod
    def _parse_entry(entry):
        verify = entry.get('ca_bundle') or entry.get('verify', True)
        return TlsConfig(verify=verify, cert=entry.get('cert'))
