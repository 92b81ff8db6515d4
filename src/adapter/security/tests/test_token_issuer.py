"""Unit tests for JoseTokenIssuer."""

import unittest

from jose import jwt

from adapter.security.jose_token_issuer import JoseTokenIssuer, JWT_ALGORITHM

CLAIMS = {
    'id': 'user-1',
    'firstname': 'John',
    'lastname': 'Doe',
    'email': 'john@example.com',
    'role': None,
}


class TestJoseTokenIssuer(unittest.TestCase):

    def setUp(self):
        self.issuer = JoseTokenIssuer('test-secret')

    def test_issue_and_decode(self):
        token = self.issuer.issue(CLAIMS)
        claims = self.issuer.decode(token)

        self.assertEqual(claims['sub'], 'user-1')
        self.assertEqual(claims['email'], 'john@example.com')
        self.assertIn('exp', claims)
        self.assertIn('iat', claims)

    def test_token_verifiable_by_any_secret_holder(self):
        token = self.issuer.issue(CLAIMS)
        payload = jwt.decode(token, 'test-secret', algorithms=[JWT_ALGORITHM])
        self.assertEqual(payload['id'], 'user-1')

    def test_wrong_secret_rejected(self):
        token = self.issuer.issue(CLAIMS)
        self.assertIsNone(JoseTokenIssuer('other-secret').decode(token))

    def test_expired_token_rejected(self):
        expired = JoseTokenIssuer('test-secret', expires_days=-1).issue(CLAIMS)
        self.assertIsNone(self.issuer.decode(expired))

    def test_garbage_rejected(self):
        self.assertIsNone(self.issuer.decode('not.a.token'))

    def test_empty_secret_rejected(self):
        with self.assertRaises(ValueError):
            JoseTokenIssuer('')


if __name__ == '__main__':
    unittest.main()
