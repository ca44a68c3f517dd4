import unittest

from support import make_app, drop_app


class AuthApiTestCase(unittest.TestCase):
    def setUp(self):
        self.app = make_app()
        self.client = self.app.test_client()

    def tearDown(self):
        drop_app(self.app)

    def test_anonymous_current_user(self):
        response = self.client.get('/api/currentUser')
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.get_json())

    def test_sign_in_known_admin(self):
        response = self.client.post('/api/signIn', json={"username": "Jane"})
        self.assertEqual(response.status_code, 200)
        user = response.get_json()
        self.assertEqual(user["name"], "Jane")
        self.assertEqual(user["roles"], ["admin"])
        self.assertEqual(self.client.get('/api/currentUser').get_json(), user)

    def test_sign_in_unknown_user_is_not_admin(self):
        user = self.client.post('/api/signIn', json={"username": "Alex"}).get_json()
        self.assertEqual(user["name"], "Alex")
        self.assertEqual(user["roles"], [])
        self.assertTrue(user["id"])

    def test_sign_in_requires_username(self):
        for body in ({}, {"username": ""}, {"username": "   "}):
            response = self.client.post('/api/signIn', json=body)
            self.assertEqual(response.status_code, 400)
        self.assertIsNone(self.client.get('/api/currentUser').get_json())

    def test_sign_out_clears_user(self):
        self.client.post('/api/signIn', json={"username": "Steve"})
        response = self.client.post('/api/signOut', json={})
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(self.client.get('/api/currentUser').get_json())


if __name__ == '__main__':
    unittest.main()
