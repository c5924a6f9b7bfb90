import unittest

from fastapi.testclient import TestClient

from vastuplan.api.main import create_app


class ApiTest(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(create_app())

    def test_generate_plan(self):
        response = self.client.post("/api/plans", json={
            "plotWidth": 30, "plotDepth": 30, "facing": "E", "floors": 2,
            "bedrooms": 3, "bathrooms": 3, "hasPooja": True, "hasBalcony": True,
            "hasParking": True, "hasStore": True,
        })
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["compliance"]["score"], 100)
        self.assertEqual(body["side_labels"]["bottom"], "EAST (Road)")
        self.assertEqual(len(body["floors"]), 2)
        ground_ids = [room["id"] for room in body["floors"][0]["rooms"]]
        self.assertIn("parking", ground_ids)
        self.assertEqual(body["floors"][0]["rooms"][0]["zone"], "SW")

    def test_generate_plan_with_empty_body_uses_defaults(self):
        response = self.client.post("/api/plans", json={})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()["floors"]), 2)

    def test_invalid_plot_is_rejected(self):
        response = self.client.post("/api/plans", json={"plotWidth": -10})
        self.assertEqual(response.status_code, 422)
        response = self.client.post("/api/plans", json={"facing": "NE"})
        self.assertEqual(response.status_code, 422)

    def test_list_rules(self):
        response = self.client.get("/api/rules")
        self.assertEqual(response.status_code, 200)
        rules = response.json()
        self.assertEqual(len(rules), 8)
        self.assertEqual(rules[0]["id"], "facing")
        self.assertEqual(sum(r["weight"] for r in rules), 100)

    def test_list_facings(self):
        facings = self.client.get("/api/facings").json()
        self.assertEqual([f["code"] for f in facings], ["E", "N", "W", "S"])
        self.assertEqual(facings[0]["side_labels"]["bottom"], "EAST (Road)")

    def test_health(self):
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})
