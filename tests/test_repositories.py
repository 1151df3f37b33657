import unittest

from app.main import ensure_indexes
from app.repositories import UserRepository
from tests.support import insert_user, make_db


class TestIndexes(unittest.TestCase):
    def test_indexes_cover_queried_fields(self):
        db = make_db()
        ensure_indexes(db)

        user_keys = [dict(i["key"]) for i in db.users.index_information().values()]
        self.assertIn({"email": 1}, user_keys)

        request_keys = [
            dict(i["key"]) for i in db.donation_requests.index_information().values()
        ]
        self.assertIn({"requesterId": 1}, request_keys)
        self.assertIn({"donationStatus": 1}, request_keys)


class TestListNonAdmins(unittest.TestCase):
    def setUp(self):
        self.db = make_db()
        self.users = UserRepository(self.db)
        insert_user(self.db, "root@example.com", role="admin")
        insert_user(self.db, "vol@example.com", role="volunteer", status="blocked")
        insert_user(self.db, "c@example.com")

    def test_role_filter_cannot_reach_admins(self):
        users, total = self.users.list_non_admins({"role": "admin"})
        self.assertEqual((users, total), ([], 0))

    def test_filters_narrow_non_admins(self):
        users, total = self.users.list_non_admins({"status": "blocked"})
        self.assertEqual(total, 1)
        self.assertEqual(users[0].email, "vol@example.com")

        _, total = self.users.list_non_admins({})
        self.assertEqual(total, 2)


if __name__ == "__main__":
    unittest.main()
