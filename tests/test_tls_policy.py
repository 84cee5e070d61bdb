import unittest

from tls_policy import TlsConfig, TlsPolicy


class TestTlsPolicy(unittest.TestCase):
    def test_default_verifies(self):
        self.assertEqual(TlsPolicy().config_for('example.com'), TlsConfig(verify=True))

    def test_host_override_is_case_insensitive(self):
        policy = TlsPolicy(hosts={'NAS.local': TlsConfig(verify=False)})
        self.assertEqual(policy.config_for('nas.local'), TlsConfig(verify=False))
        self.assertEqual(policy.config_for('other.local'), TlsConfig(verify=True))

    def test_from_options(self):
        policy = TlsPolicy.from_options({
            'cert': '/etc/client.pem',
            'hosts': {'self-signed.local': {'verify': False}, 'private.local': {'ca_bundle': '/etc/ca.pem'}},
        })
        self.assertEqual(policy.config_for('x.local'), TlsConfig(verify=True, cert='/etc/client.pem'))
        self.assertEqual(policy.config_for('self-signed.local'), TlsConfig(verify=False))
        self.assertEqual(policy.config_for('private.local'), TlsConfig(verify='/etc/ca.pem'))


if __name__ == '__main__':
    unittest.main()
