from datetime import datetime, timedelta

from hostelmate.models.base.enums import ComplaintCategory


def create(client, headers, **overrides):
    payload = {
        "title": "Fan not working!",
        "description": "The ceiling fan stopped working last night.",
        "category": "Electrical",
        "subcategory": "Fan",
    }
    payload.update(overrides)
    return client.post("/api/complaints", json=payload, headers=headers)


def resolve(client, headers, complaint_id):
    return client.put(
        f"/api/complaints/{complaint_id}/status",
        json={"status": "Resolved"},
        headers=headers,
    )


class TestAuthentication:
    def test_missing_bearer_is_401(self, client):
        response = client.get("/api/complaints/my")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_FAILED"

    def test_garbage_token_is_401(self, client):
        response = client.get(
            "/api/complaints/my",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "TOKEN_INVALID"

    def test_request_id_and_timing_headers(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == "abc-123"
        assert "X-Process-Time" in response.headers


class TestCreateComplaint:
    def test_created_with_defaults(self, client, resident_headers):
        response = create(client, resident_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Complaint created successfully"
        complaint = body["complaint"]
        assert complaint["status"] == "Open"
        assert complaint["priority"] == "Medium"
        assert complaint["roomNumber"] == "A101"
        assert complaint["resolvedAt"] is None
        assert complaint["user"]["email"] == "john@hostel.com"
        assert complaint["assignedAdmin"] is None

    def test_long_description_is_accepted(self, client, resident_headers):
        response = create(client, resident_headers, description="x" * 2001)

        assert response.status_code == 201
        assert len(response.json()["complaint"]["description"]) == 2001

    def test_timestamps_carry_utc_offset(self, client, resident_headers):
        complaint = create(client, resident_headers).json()["complaint"]

        for field in ("createdAt", "updatedAt"):
            parsed = datetime.fromisoformat(complaint[field].replace("Z", "+00:00"))
            assert parsed.utcoffset() == timedelta(0)

    def test_validation_errors_are_400_per_field(self, client, resident_headers):
        response = create(client, resident_headers, title="Fan", subcategory="Tap")

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert set(error["details"]["field_errors"]) == {"title", "subcategory"}

    def test_missing_fields(self, client, resident_headers):
        response = client.post("/api/complaints", json={}, headers=resident_headers)

        assert response.status_code == 400
        fields = response.json()["error"]["details"]["field_errors"]
        assert {"title", "description", "category", "subcategory"} <= set(fields)

    def test_categories(self, client, resident_headers):
        response = client.get("/api/complaints/categories", headers=resident_headers)

        assert response.status_code == 200
        table = response.json()
        assert len(table) == 13
        assert table["Internet & Connection"] == ["Network Booster", "DTH", "WiFi"]


class TestMyComplaints:
    def test_grouped_by_category(self, client, resident_headers, other_headers):
        create(client, resident_headers)
        create(client, resident_headers, title="Leaking tap", category="Plumbing", subcategory="Tap")
        create(client, other_headers, title="Someone else's fan")

        response = client.get("/api/complaints/my", headers=resident_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert set(body["complaints"]) == {"Electrical", "Plumbing"}

    def test_status_filter(self, client, resident_headers, admin_headers):
        open_id = create(client, resident_headers).json()["complaint"]["id"]
        done_id = create(client, resident_headers, title="Another fan").json()["complaint"]["id"]
        resolve(client, admin_headers, done_id)

        active = client.get("/api/complaints/my?status=active", headers=resident_headers).json()
        resolved = client.get("/api/complaints/my?status=resolved", headers=resident_headers).json()

        assert [c["id"] for c in active["complaints"]["Electrical"]] == [open_id]
        assert [c["id"] for c in resolved["complaints"]["Electrical"]] == [done_id]


class TestAllComplaints:
    def test_non_admin_is_403(self, client, resident_headers):
        response = client.get("/api/complaints/all", headers=resident_headers)

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "AUTHORIZATION_FAILED"

    def test_paginates(self, client, admin_headers, resident, make_complaint):
        for i in range(25):
            make_complaint(resident, title=f"Fan complaint {i:02d}")

        response = client.get("/api/complaints/all?page=3&limit=10", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 25
        assert body["totalPages"] == 3
        assert body["currentPage"] == 3
        assert len(body["complaints"]) == 5

    def test_default_page_size(self, client, admin_headers, resident, make_complaint):
        for i in range(12):
            make_complaint(resident, title=f"Fan complaint {i:02d}")

        body = client.get("/api/complaints/all", headers=admin_headers).json()

        assert body["currentPage"] == 1
        assert len(body["complaints"]) == 10
        assert body["totalPages"] == 2

    def test_search_wifi(self, client, admin_headers, resident, make_complaint):
        make_complaint(
            resident,
            title="No WiFi signal",
            category=ComplaintCategory.INTERNET_AND_CONNECTION,
            subcategory="WiFi",
        )
        make_complaint(resident, title="Fan rattles at night")

        body = client.get("/api/complaints/all?search=wifi", headers=admin_headers).json()

        assert body["total"] == 1
        assert body["complaints"][0]["title"] == "No WiFi signal"

    def test_all_filters_are_ignored(self, client, admin_headers, resident, make_complaint):
        make_complaint(resident)

        body = client.get(
            "/api/complaints/all?category=all&status=all",
            headers=admin_headers,
        ).json()

        assert body["total"] == 1

    def test_unknown_filter_values_give_empty_page(self, client, admin_headers, resident, make_complaint):
        make_complaint(resident)

        for query in ("status=Closed", "category=Gardening"):
            response = client.get(f"/api/complaints/all?{query}", headers=admin_headers)

            assert response.status_code == 200
            body = response.json()
            assert body["total"] == 0
            assert body["complaints"] == []

    def test_non_numeric_page_is_400(self, client, admin_headers):
        response = client.get("/api/complaints/all?page=two", headers=admin_headers)

        assert response.status_code == 400


class TestStatusUpdate:
    def test_resolve_sets_admin_and_timestamp(self, client, resident_headers, admin_headers, admin):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]

        response = client.put(
            f"/api/complaints/{complaint_id}/status",
            json={"status": "Resolved", "resolverName": "Ravi", "adminNotes": "Capacitor replaced"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Complaint status updated successfully"
        complaint = body["complaint"]
        assert complaint["status"] == "Resolved"
        assert complaint["resolverName"] == "Ravi"
        assert complaint["adminNotes"] == "Capacitor replaced"
        assert complaint["assignedAdmin"]["id"] == admin.id
        assert complaint["resolvedAt"] is not None

    def test_reopen_keeps_first_resolution_time(self, client, resident_headers, admin_headers):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]

        first = resolve(client, admin_headers, complaint_id).json()["complaint"]["resolvedAt"]
        client.put(
            f"/api/complaints/{complaint_id}/status",
            json={"status": "Open"},
            headers=admin_headers,
        )
        second = resolve(client, admin_headers, complaint_id).json()["complaint"]["resolvedAt"]

        assert second == first

    def test_unknown_id_is_404(self, client, admin_headers):
        response = resolve(client, admin_headers, "missing")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"

    def test_bad_status_is_400(self, client, resident_headers, admin_headers):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]

        response = client.put(
            f"/api/complaints/{complaint_id}/status",
            json={"status": "Closed"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert "status" in response.json()["error"]["details"]["field_errors"]

    def test_non_admin_is_403(self, client, resident_headers):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]

        response = resolve(client, resident_headers, complaint_id)

        assert response.status_code == 403

    def test_non_object_body_from_non_admin_is_403(self, client, resident_headers):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]

        response = client.put(
            f"/api/complaints/{complaint_id}/status",
            json=["Resolved"],
            headers=resident_headers,
        )

        assert response.status_code == 403

    def test_non_object_body_from_admin_is_400(self, client, resident_headers, admin_headers):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]

        response = client.put(
            f"/api/complaints/{complaint_id}/status",
            json=["Resolved"],
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_long_admin_notes_are_accepted(self, client, resident_headers, admin_headers):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]

        response = client.put(
            f"/api/complaints/{complaint_id}/status",
            json={"status": "In Progress", "adminNotes": "n" * 2001},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert len(response.json()["complaint"]["adminNotes"]) == 2001

    def test_resolved_at_carries_utc_offset(self, client, resident_headers, admin_headers):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]

        resolved_at = resolve(client, admin_headers, complaint_id).json()["complaint"]["resolvedAt"]

        parsed = datetime.fromisoformat(resolved_at.replace("Z", "+00:00"))
        assert parsed.utcoffset() == timedelta(0)


class TestFeedback:
    def test_owner_rates_resolved_complaint(self, client, resident_headers, admin_headers):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]
        resolve(client, admin_headers, complaint_id)

        response = client.put(
            f"/api/complaints/{complaint_id}/feedback",
            json={"rating": 5, "feedback": "Quick fix"},
            headers=resident_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Feedback added successfully"
        assert body["complaint"]["rating"] == 5
        assert body["complaint"]["feedback"] == "Quick fix"

    def test_rating_six_is_400(self, client, resident_headers, admin_headers):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]
        resolve(client, admin_headers, complaint_id)

        response = client.put(
            f"/api/complaints/{complaint_id}/feedback",
            json={"rating": 6},
            headers=resident_headers,
        )

        assert response.status_code == 400
        assert "rating" in response.json()["error"]["details"]["field_errors"]

    def test_open_complaint_is_404(self, client, resident_headers):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]

        response = client.put(
            f"/api/complaints/{complaint_id}/feedback",
            json={"rating": 4},
            headers=resident_headers,
        )

        assert response.status_code == 404

    def test_someone_elses_complaint_is_404(
        self, client, resident_headers, other_headers, admin_headers
    ):
        complaint_id = create(client, resident_headers).json()["complaint"]["id"]
        resolve(client, admin_headers, complaint_id)

        response = client.put(
            f"/api/complaints/{complaint_id}/feedback",
            json={"rating": 4},
            headers=other_headers,
        )

        assert response.status_code == 404


class TestStats:
    def test_admin_stats(self, client, resident_headers, admin_headers):
        first = create(client, resident_headers).json()["complaint"]["id"]
        create(client, resident_headers, title="Leaking tap", category="Plumbing", subcategory="Tap")
        resolve(client, admin_headers, first)

        response = client.get("/api/complaints/stats", headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert body["open"] == 1
        assert body["inProgress"] == 0
        assert body["resolved"] == 1
        electrical = next(s for s in body["categoryStats"] if s["category"] == "Electrical")
        assert electrical == {"category": "Electrical", "count": 1, "resolvedCount": 1}

    def test_non_admin_is_403(self, client, resident_headers):
        response = client.get("/api/complaints/stats", headers=resident_headers)

        assert response.status_code == 403
