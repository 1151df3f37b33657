import unittest

from tests.support import bearer, insert_user, make_client

DONATION = {
    "recipientName": "Rahim",
    "bloodGroup": "B+",
    "district": "Dhaka",
    "upazila": "Savar",
    "hospitalName": "Enam Medical",
    "fullAddress": "Savar, Dhaka",
    "donationDate": "2024-05-01",
    "donationTime": "10:30",
}


class ApiTestCase(unittest.TestCase):
    def setUp(self):
        client, self.db, self.verifier, self.gateway = make_client()
        self.client = client.__enter__()
        self.addCleanup(client.__exit__, None, None, None)

    def login(self, email, **fields):
        """Store an account and return auth headers for it."""
        doc = insert_user(self.db, email, **fields)
        token = self.verifier.add(f"token-{email}", email)
        return doc, bearer(token)


class TestHealth(ApiTestCase):
    def test_health_endpoints(self):
        self.assertEqual(self.client.get("/api/v1/health").json()["status"], "healthy")
        self.assertEqual(self.client.get("/api/v1/health/db").json()["status"], "healthy")

    def test_request_id_is_echoed(self):
        response = self.client.get("/api/v1/health", headers={"X-Request-ID": "abc"})
        self.assertEqual(response.headers["X-Request-ID"], "abc")


class TestAccounts(ApiTestCase):
    def test_add_user_then_login(self):
        response = self.client.post(
            "/api/v1/auth/add-user", json={"email": "Ann@Example.com", "name": "Ann"}
        )
        self.assertEqual(response.status_code, 201)
        created = response.json()["user"]
        self.assertEqual(created["email"], "ann@example.com")
        self.assertEqual(created["loginCount"], 0)

        token = self.verifier.add("ann", "ann@example.com", "Ann")
        me = self.client.get("/api/v1/auth/me", headers=bearer(token)).json()["user"]
        self.assertEqual(me["role"], "customer")
        self.assertEqual(me["status"], "active")
        self.assertGreaterEqual(me["loginCount"], 1)
        self.assertEqual(self.db.users.count_documents({}), 1)

    def test_add_user_never_changes_existing_grants(self):
        insert_user(self.db, "shop@example.com", role="merchant")
        response = self.client.post(
            "/api/v1/auth/add-user",
            json={"email": "shop@example.com", "role": "donor", "district": "Dhaka"},
        )
        self.assertEqual(response.status_code, 201)
        user = response.json()["user"]
        self.assertEqual(user["role"], "merchant")
        self.assertEqual(user["district"], "Dhaka")

    def test_add_user_rejects_privileged_roles(self):
        response = self.client.post(
            "/api/v1/auth/add-user", json={"email": "x@example.com", "role": "admin"}
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["details"][0]["path"], "role")

    def test_validation_failure_shape(self):
        response = self.client.post("/api/v1/auth/add-user", json={"email": "nope"})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body["error"], "Validation failed")
        self.assertEqual(body["details"][0]["path"], "email")
        self.assertEqual(self.db.users.count_documents({}), 0)

    def test_me_requires_token(self):
        response = self.client.get("/api/v1/auth/me")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "No token provided"})

        response = self.client.get("/api/v1/auth/me", headers=bearer("forged"))
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Invalid or expired token"})

    def test_update_profile(self):
        _, headers = self.login("d@example.com")
        response = self.client.patch(
            "/api/v1/auth/update-profile",
            json={"bloodGroup": "O-", "phone": "0123"},
            headers=headers,
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["user"]["bloodGroup"], "O-")


class TestMerchantWorkflow(ApiTestCase):
    def test_request_approve_then_sell(self):
        doc, headers = self.login("shop@example.com")
        _, admin = self.login("admin@example.com", role="admin")

        response = self.client.post(
            "/api/v1/auth/request-merchant",
            json={"shopDetails": {"shopName": "Acme", "shopNumber": "7", "shopAddress": "Main St"}},
            headers=headers,
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["user"]["roleRequest"]["status"], "pending")

        again = self.client.post("/api/v1/auth/request-merchant", headers=headers)
        self.assertEqual(again.status_code, 400)

        pending = self.client.get("/api/v1/admin/pending-merchants", headers=admin).json()
        self.assertEqual([u["email"] for u in pending], ["shop@example.com"])

        denied = self.client.post("/api/v1/products", json={"name": "Lamp", "price": 10}, headers=headers)
        self.assertEqual(denied.status_code, 403)

        approved = self.client.patch(f"/api/v1/admin/approve-merchant/{doc['_id']}", headers=admin)
        self.assertEqual(approved.status_code, 200)
        self.assertEqual(approved.json()["user"]["role"], "merchant")

        created = self.client.post(
            "/api/v1/products", json={"name": "Lamp", "price": 10, "stock": 2}, headers=headers
        )
        self.assertEqual(created.status_code, 201)
        self.assertTrue(created.json()["inStock"])

        rejected = self.client.patch(f"/api/v1/admin/reject-merchant/{doc['_id']}", headers=admin)
        self.assertEqual(rejected.status_code, 400)

    def test_resolving_without_request_is_not_found(self):
        doc, _ = self.login("plain@example.com")
        _, admin = self.login("admin@example.com", role="admin")
        response = self.client.patch(f"/api/v1/admin/approve-merchant/{doc['_id']}", headers=admin)
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["error"], "No merchant request found")

    def test_admin_routes_reject_non_admins(self):
        _, headers = self.login("user@example.com")
        response = self.client.get("/api/v1/admin/users", headers=headers)
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"], "Only admin allowed")

    def test_status_update_is_idempotent_and_blocks(self):
        doc, headers = self.login("user@example.com")
        _, admin = self.login("admin@example.com", role="admin")
        url = f"/api/v1/admin/users/{doc['_id']}/status"

        first = self.client.patch(url, json={"status": "blocked"}, headers=admin).json()
        second = self.client.patch(url, json={"status": "blocked"}, headers=admin).json()
        self.assertEqual(first, {"matchedCount": 1, "modifiedCount": 1})
        self.assertEqual(second, {"matchedCount": 1, "modifiedCount": 0})

        response = self.client.post("/api/v1/donation-requests", json=DONATION, headers=headers)
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.json()["error"], "Account not approved yet")

    def test_admin_user_listing_hides_admins(self):
        self.login("user@example.com")
        _, admin = self.login("admin@example.com", role="admin")
        body = self.client.get("/api/v1/admin/users", headers=admin).json()
        self.assertEqual(body["total"], 1)
        self.assertEqual(body["items"][0]["email"], "user@example.com")

    def test_admin_role_filter_still_hides_admins(self):
        self.login("user@example.com")
        _, admin = self.login("admin@example.com", role="admin")
        body = self.client.get(
            "/api/v1/admin/users", params={"role": "admin"}, headers=admin
        ).json()
        self.assertEqual(body["total"], 0)
        self.assertEqual(body["items"], [])

        customers = self.client.get(
            "/api/v1/admin/users", params={"role": "customer"}, headers=admin
        ).json()
        self.assertEqual([u["email"] for u in customers["items"]], ["user@example.com"])

    def test_blocked_account_cannot_unblock_via_merchant_request(self):
        doc, headers = self.login("blocked@example.com", status="blocked")

        response = self.client.post("/api/v1/auth/request-merchant", headers=headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["user"]["status"], "blocked")
        self.assertEqual(self.db.users.find_one({"_id": doc["_id"]})["status"], "blocked")

        denied = self.client.post("/api/v1/donation-requests", json=DONATION, headers=headers)
        self.assertEqual(denied.status_code, 403)


class TestProducts(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.owner_doc, self.owner = self.login("owner@example.com", role="merchant")
        _, self.rival = self.login("rival@example.com", role="merchant")
        _, self.admin = self.login("admin@example.com", role="admin")
        response = self.client.post(
            "/api/v1/products",
            json={"name": "Kettle", "price": 20, "stock": 1, "category": "kitchen"},
            headers=self.owner,
        )
        self.product_id = response.json()["_id"]

    def test_only_owner_or_admin_may_edit(self):
        url = f"/api/v1/products/{self.product_id}/edit"
        self.assertEqual(
            self.client.patch(url, json={"price": 5}, headers=self.rival).status_code, 403
        )
        response = self.client.patch(url, json={"price": 25}, headers=self.admin)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["price"], 25)

    def test_stock_out_twice(self):
        url = f"/api/v1/products/{self.product_id}/stock-out"
        first = self.client.patch(url, headers=self.owner).json()
        second = self.client.patch(url, headers=self.owner).json()
        self.assertEqual(first["modifiedCount"], 1)
        self.assertEqual(second["modifiedCount"], 0)

    def test_public_listing_and_lookup(self):
        listing = self.client.get("/api/v1/products", params={"search": "kett"}).json()
        self.assertEqual(listing["total"], 1)
        self.assertEqual(
            self.client.get(f"/api/v1/products/{self.product_id}").json()["name"], "Kettle"
        )
        self.assertEqual(self.client.get("/api/v1/products/bogus").status_code, 404)

    def test_invalid_product_payload(self):
        response = self.client.post(
            "/api/v1/products", json={"name": "Pan", "price": -1}, headers=self.owner
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["details"][0]["path"], "price")

    def test_delete_by_owner(self):
        response = self.client.delete(f"/api/v1/products/{self.product_id}", headers=self.owner)
        self.assertEqual(response.json(), {"deletedCount": 1})


class TestDonationRequests(ApiTestCase):
    def setUp(self):
        super().setUp()
        _, self.requester = self.login("req@example.com")
        _, self.donor = self.login("donor@example.com", role="donor", name="Dina")

    def _create(self):
        response = self.client.post("/api/v1/donation-requests", json=DONATION, headers=self.requester)
        self.assertEqual(response.status_code, 201)
        return response.json()

    def test_new_requests_are_pending(self):
        created = self._create()
        self.assertEqual(created["donationStatus"], "pending")
        self.assertEqual(created["requesterEmail"], "req@example.com")

    def test_client_cannot_choose_initial_status(self):
        response = self.client.post(
            "/api/v1/donation-requests",
            json={**DONATION, "donationStatus": "done"},
            headers=self.requester,
        )
        self.assertEqual(response.status_code, 400)

    def test_respond_claims_once(self):
        request_id = self._create()["_id"]
        url = f"/api/v1/donation-requests/{request_id}/respond"

        first = self.client.patch(url, headers=self.donor).json()
        self.assertEqual(first, {"matchedCount": 1, "modifiedCount": 1})

        stored = self.client.get(f"/api/v1/donation-requests/{request_id}").json()
        self.assertEqual(stored["donationStatus"], "inprogress")
        self.assertEqual(stored["donorInfo"], {"name": "Dina", "email": "donor@example.com"})

        second = self.client.patch(url, headers=self.requester).json()
        self.assertEqual(second["modifiedCount"], 0)

    def test_owner_closes_request(self):
        request_id = self._create()["_id"]
        url = f"/api/v1/donation-requests/{request_id}/status"
        self.assertEqual(
            self.client.patch(url, json={"status": "done"}, headers=self.donor).status_code, 403
        )
        response = self.client.patch(url, json={"status": "done"}, headers=self.requester)
        self.assertEqual(response.json()["modifiedCount"], 1)

    def test_mine_lists_own_requests(self):
        self._create()
        mine = self.client.get("/api/v1/donation-requests/mine", headers=self.requester).json()
        theirs = self.client.get("/api/v1/donation-requests/mine", headers=self.donor).json()
        self.assertEqual(mine["total"], 1)
        self.assertEqual(theirs["total"], 0)


class TestBlogs(ApiTestCase):
    def test_draft_publish_flow(self):
        _, volunteer = self.login("vol@example.com", role="volunteer")
        _, admin = self.login("admin@example.com", role="admin")
        _, customer = self.login("c@example.com")

        payload = {"title": "Why donate", "content": "Because."}
        self.assertEqual(
            self.client.post("/api/v1/blogs", json=payload, headers=customer).status_code, 403
        )
        blog = self.client.post("/api/v1/blogs", json=payload, headers=volunteer).json()
        self.assertEqual(blog["status"], "draft")

        url = f"/api/v1/blogs/{blog['_id']}/publish"
        self.assertEqual(self.client.patch(url, headers=volunteer).status_code, 403)
        self.assertEqual(self.client.patch(url, headers=admin).json()["modifiedCount"], 1)
        self.assertEqual(self.client.patch(url, headers=admin).json()["modifiedCount"], 0)

        published = self.client.get("/api/v1/blogs", params={"status": "published"}).json()
        self.assertEqual(published["total"], 1)


class TestFundingsAndContacts(ApiTestCase):
    def test_fundings_total(self):
        self.assertEqual(self.client.get("/api/v1/fundings/total").json(), {"total": 0})

        _, headers = self.login("giver@example.com")
        for amount in (10, 15.5):
            response = self.client.post("/api/v1/fundings", json={"amount": amount}, headers=headers)
            self.assertEqual(response.status_code, 201)

        self.assertEqual(self.client.get("/api/v1/fundings/total").json(), {"total": 25.5})
        listing = self.client.get("/api/v1/fundings", headers=headers).json()
        self.assertEqual(listing["total"], 2)

    def test_contact_messages(self):
        response = self.client.post(
            "/api/v1/contacts",
            json={"name": "Ann", "email": "ann@example.com", "subject": "Hi", "message": "Hello"},
        )
        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.db.mailbox.count_documents({}), 1)

        self.assertEqual(self.client.get("/api/v1/contacts").status_code, 401)
        _, admin = self.login("admin@example.com", role="admin")
        messages = self.client.get("/api/v1/contacts", headers=admin).json()
        self.assertEqual([m["subject"] for m in messages], ["Hi"])


if __name__ == "__main__":
    unittest.main()
