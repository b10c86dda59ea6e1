"""
Tests for the Customer resource, including its trim/blank rules.
"""

import pytest

from pawcademy.db.models.customer import Customer


class TestCustomerCrud:
    """Full create/read/replace/delete cycle."""

    def test_create_returns_stored_record_with_location(self, client, customer_payload):
        """Test that create answers 201 with the generated id and a Location header."""
        response = client.post("/api/Customer", json=customer_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["customerId"] > 0
        assert body["firstName"] == "Amy"
        assert body["lastName"] == "Lee"
        assert body["phoneNum"] == "555-0100"
        assert body["address"] == "12 Bark St"
        assert response.headers["location"].endswith(f"/api/Customer/{body['customerId']}")

    def test_client_supplied_id_is_ignored(self, client, customer_payload):
        """Test that an id in the create body is replaced by the generated one."""
        first = client.post("/api/Customer", json=customer_payload).json()
        second = client.post("/api/Customer", json={**customer_payload, "customerId": first["customerId"]}).json()

        assert second["customerId"] != first["customerId"]
        assert len(client.get("/api/Customer").json()) == 2

    def test_documented_scenario(self, client):
        """Test create, read, replace phone, delete, then 404 on read."""
        created = client.post(
            "/api/Customer", json={"firstName": "Amy", "lastName": "Lee", "phoneNum": "555-0100"}
        )
        assert created.status_code == 201
        customer_id = created.json()["customerId"]

        fetched = client.get(f"/api/Customer/{customer_id}")
        assert fetched.status_code == 200
        assert fetched.json() == {
            "customerId": customer_id,
            "firstName": "Amy",
            "lastName": "Lee",
            "phoneNum": "555-0100",
            "address": None,
        }

        updated = client.put(
            f"/api/Customer/{customer_id}",
            json={"customerId": customer_id, "firstName": "Amy", "lastName": "Lee", "phoneNum": "555-0199"},
        )
        assert updated.status_code == 204
        assert updated.content == b""
        assert client.get(f"/api/Customer/{customer_id}").json()["phoneNum"] == "555-0199"

        deleted = client.delete(f"/api/Customer/{customer_id}")
        assert deleted.status_code == 204

        missing = client.get(f"/api/Customer/{customer_id}")
        assert missing.status_code == 404
        assert missing.json() == {"message": f"Customer with ID {customer_id} not found"}

    def test_list_returns_rows_in_insert_order(self, client, create):
        """Test that the collection lists every customer in id order."""
        ids = [
            create("Customer", {"firstName": name, "lastName": "Lee", "phoneNum": f"555-01{i:02d}"})["customerId"]
            for i, name in enumerate(["Amy", "Ben", "Cal"])
        ]

        listed = client.get("/api/Customer")

        assert listed.status_code == 200
        assert [c["customerId"] for c in listed.json()] == ids

    def test_list_empty(self, client):
        """Test that an empty table lists as an empty array."""
        response = client.get("/api/Customer")

        assert response.status_code == 200
        assert response.json() == []

    def test_delete_keeps_the_customers_pets(self, client, create, customer_payload, pet_payload_for):
        """Test that deleting a customer does not cascade to their pets."""
        customer = create("Customer", customer_payload)
        pet = create("Pet", pet_payload_for(customer["customerId"]))

        assert client.delete(f"/api/Customer/{customer['customerId']}").status_code == 204

        orphan = client.get(f"/api/Pet/{pet['petId']}")
        assert orphan.status_code == 200
        assert orphan.json()["customerId"] == customer["customerId"]


class TestCustomerValidation:
    """Trim and required-field rules."""

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("firstName", "", "First name is required"),
            ("firstName", "   ", "First name is required"),
            ("firstName", None, "First name is required"),
            ("lastName", " \t", "Last name is required"),
            ("phoneNum", "", "Phone number is required"),
        ],
    )
    def test_blank_required_field_is_rejected(self, client, customer_payload, field, value, message):
        """Test that each blank required field gets its own 400 message."""
        response = client.post("/api/Customer", json={**customer_payload, field: value})

        assert response.status_code == 400
        assert response.json() == {"message": message}

    def test_missing_fields_report_first_name_first(self, client):
        """Test that an empty body reports the first name before the others."""
        response = client.post("/api/Customer", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "First name is required"

    def test_rejected_create_stores_nothing(self, client, db_session, customer_payload):
        """Test that a rejected create leaves the table untouched."""
        client.post("/api/Customer", json={**customer_payload, "phoneNum": "  "})

        assert db_session.query(Customer).count() == 0

    def test_fields_are_trimmed(self, client, db_session):
        """Test that identity fields and address are stored trimmed."""
        body = client.post(
            "/api/Customer",
            json={"firstName": "  Amy ", "lastName": " Lee", "phoneNum": "555-0100  ", "address": "  1 Main Rd "},
        ).json()

        assert (body["firstName"], body["lastName"], body["phoneNum"], body["address"]) == (
            "Amy",
            "Lee",
            "555-0100",
            "1 Main Rd",
        )
        stored = db_session.get(Customer, body["customerId"])
        assert stored.first_name == "Amy"
        assert stored.address == "1 Main Rd"

    def test_whitespace_address_is_stored_as_null(self, client, db_session, customer_payload):
        """Test that a whitespace-only address becomes NULL, not a blank string."""
        body = client.post("/api/Customer", json={**customer_payload, "address": "    "}).json()

        assert body["address"] is None
        assert db_session.get(Customer, body["customerId"]).address is None

    def test_update_applies_the_same_rules(self, client, create, customer_payload):
        """Test that replace trims fields and rejects a blank last name."""
        customer_id = create("Customer", customer_payload)["customerId"]

        bad = client.put(
            f"/api/Customer/{customer_id}",
            json={**customer_payload, "customerId": customer_id, "lastName": " "},
        )
        assert bad.status_code == 400
        assert bad.json() == {"message": "Last name is required"}

        ok = client.put(
            f"/api/Customer/{customer_id}",
            json={**customer_payload, "customerId": customer_id, "firstName": " Amelia ", "address": " "},
        )
        assert ok.status_code == 204
        stored = client.get(f"/api/Customer/{customer_id}").json()
        assert stored["firstName"] == "Amelia"
        assert stored["address"] is None

    def test_snake_case_input_is_accepted(self, client):
        """Test that snake_case field names bind as well as camelCase."""
        response = client.post("/api/Customer", json={"first_name": "Amy", "last_name": "Lee", "phone_num": "555"})

        assert response.status_code == 201
        assert response.json()["firstName"] == "Amy"


class TestCustomerErrors:
    """Id mismatch, not-found and non-integer ids."""

    def test_update_id_mismatch(self, client, create, customer_payload):
        """Test that a body id different from the path id is a 400."""
        customer_id = create("Customer", customer_payload)["customerId"]

        response = client.put(f"/api/Customer/{customer_id}", json={**customer_payload, "customerId": customer_id + 1})

        assert response.status_code == 400
        assert response.json() == {"message": "ID mismatch"}

    def test_update_without_body_id_is_a_mismatch(self, client, create, customer_payload):
        """Test that omitting the body id counts as a mismatch."""
        customer_id = create("Customer", customer_payload)["customerId"]

        response = client.put(f"/api/Customer/{customer_id}", json=customer_payload)

        assert response.status_code == 400

    def test_update_missing_row(self, client, customer_payload):
        """Test that replacing an unknown id is a 404."""
        response = client.put("/api/Customer/999", json={**customer_payload, "customerId": 999})

        assert response.status_code == 404
        assert response.json() == {"message": "Customer with ID 999 not found"}

    def test_delete_missing_row(self, client):
        """Test that deleting an unknown id is a 404."""
        response = client.delete("/api/Customer/999")

        assert response.status_code == 404

    def test_non_integer_id_is_a_validation_error(self, client):
        """Test that a non-numeric path id is rejected with 400."""
        response = client.get("/api/Customer/abc")

        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"
