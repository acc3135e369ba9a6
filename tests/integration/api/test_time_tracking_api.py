"""
API tests for authentication, timers, time entries, balance and reports.
"""

import csv
import io


def entry_payload(start: str, end: str, **extra) -> dict:
    payload = {"startTime": f"2024-01-15T{start}:00", "endTime": f"2024-01-15T{end}:00"}
    payload.update(extra)
    return payload


class TestAuthentication:
    """Test cases for bearer token handling."""

    def test_missing_token(self, client):
        """Test protected endpoints reject requests without a token."""
        response = client.get("/api/time-entries")

        assert response.status_code == 401
        assert response.json()["code"] == "AUTHENTICATION_REQUIRED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token(self, client):
        """Test garbage tokens are rejected."""
        response = client.get("/api/user", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == 401

    def test_unknown_user(self, client, auth_headers, employee):
        """Test tokens for users that do not exist are rejected."""
        employee.id = "00000000-0000-0000-0000-000000000000"

        response = client.get("/api/user", headers=auth_headers(employee))

        assert response.status_code == 401

    def test_current_user(self, client, auth_headers, employee):
        """Test the profile of the token's user is returned in camelCase."""
        response = client.get("/api/user", headers=auth_headers(employee))

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "anna"
        assert body["firstName"] == "Anna"
        assert body["targetHoursPerDay"] == 8
        assert body["role"] == "employee"

    def test_health(self, client):
        """Test the health endpoint needs no token."""
        assert client.get("/api/health").json()["status"] == "healthy"


class TestTimerAPI:
    """Test cases for the timer endpoints."""

    def test_start_and_stop(self, client, auth_headers, employee):
        """Test a timer runs until it is stopped."""
        headers = auth_headers(employee)

        started = client.post("/api/timer/start", json={"description": "Meeting"}, headers=headers)
        assert started.status_code == 201
        assert started.json()["isRunning"] is True
        assert started.json()["endTime"] is None

        running = client.get("/api/time-entries/running", headers=headers)
        assert running.json()["id"] == started.json()["id"]

        stopped = client.post("/api/timer/stop", headers=headers)
        assert stopped.status_code == 200
        assert stopped.json()["isRunning"] is False
        assert stopped.json()["endTime"] is not None

        assert client.get("/api/time-entries/running", headers=headers).json() is None

    def test_start_without_body(self, client, auth_headers, employee):
        """Test the request body is optional."""
        response = client.post("/api/timer/start", headers=auth_headers(employee))

        assert response.status_code == 201

    def test_restart_keeps_single_running_timer(self, client, auth_headers, employee):
        """Test starting twice leaves exactly one running entry."""
        headers = auth_headers(employee)

        first = client.post("/api/timer/start", headers=headers).json()
        second = client.post("/api/timer/start", headers=headers).json()

        entries = client.get("/api/time-entries", headers=headers).json()
        running = [entry for entry in entries if entry["isRunning"]]
        assert [entry["id"] for entry in running] == [second["id"]]
        previous = next(entry for entry in entries if entry["id"] == first["id"])
        assert previous["endTime"] is not None

    def test_stop_without_timer(self, client, auth_headers, employee):
        """Test stopping with nothing running is a 400."""
        response = client.post("/api/timer/stop", headers=auth_headers(employee))

        assert response.status_code == 400
        assert response.json()["message"] == "No running timer found"


class TestTimeEntriesAPI:
    """Test cases for manual time entries."""

    def test_create_entry(self, client, auth_headers, employee):
        """Test a manual entry reports its net duration."""
        response = client.post(
            "/api/time-entries",
            json=entry_payload("09:00", "17:00", breakMinutes=30, description="Angebot"),
            headers=auth_headers(employee)
        )

        assert response.status_code == 201
        body = response.json()
        assert body["durationHours"] == 7.5
        assert body["date"] == "2024-01-15"
        assert body["status"] == "draft"
        assert body["user"]["username"] == "anna"

    def test_overlap_rejected(self, client, auth_headers, employee):
        """Test an overlapping entry on the same day is a 400."""
        headers = auth_headers(employee)
        client.post("/api/time-entries", json=entry_payload("09:00", "12:00"), headers=headers)

        response = client.post("/api/time-entries", json=entry_payload("10:30", "13:00"), headers=headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Overlapping times detected"

    def test_adjacent_entry_allowed(self, client, auth_headers, employee):
        """Test an entry starting where the previous one ends is accepted."""
        headers = auth_headers(employee)
        client.post("/api/time-entries", json=entry_payload("09:00", "12:00"), headers=headers)

        response = client.post("/api/time-entries", json=entry_payload("12:00", "13:00"), headers=headers)

        assert response.status_code == 201

    def test_end_before_start(self, client, auth_headers, employee):
        """Test schema violations are reported as 400 with field errors."""
        response = client.post(
            "/api/time-entries", json=entry_payload("12:00", "09:00"), headers=auth_headers(employee)
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert response.json()["errors"]

    def test_employee_cannot_approve(self, client, auth_headers, employee):
        """Test approving requires the admin role."""
        response = client.post(
            "/api/time-entries",
            json=entry_payload("09:00", "12:00", status="approved"),
            headers=auth_headers(employee)
        )

        assert response.status_code == 403

    def test_foreign_entry_forbidden(self, client, auth_headers, employee, create_user):
        """Test users cannot read or delete other users' entries."""
        other = create_user("bernd")
        created = client.post(
            "/api/time-entries", json=entry_payload("09:00", "12:00"), headers=auth_headers(employee)
        ).json()

        assert client.get(f"/api/time-entries/{created['id']}", headers=auth_headers(other)).status_code == 403
        assert client.delete(f"/api/time-entries/{created['id']}", headers=auth_headers(other)).status_code == 403

    def test_update_and_delete(self, client, auth_headers, employee):
        """Test updating fields and deleting an entry."""
        headers = auth_headers(employee)
        created = client.post("/api/time-entries", json=entry_payload("09:00", "12:00"), headers=headers).json()

        updated = client.put(
            f"/api/time-entries/{created['id']}", json={"breakMinutes": 60}, headers=headers
        )
        assert updated.status_code == 200
        assert updated.json()["durationHours"] == 2.0

        deleted = client.delete(f"/api/time-entries/{created['id']}", headers=headers)
        assert deleted.json()["message"] == "Time entry deleted"
        assert client.get(f"/api/time-entries/{created['id']}", headers=headers).status_code == 404

    def test_list_filtered_by_date(self, client, auth_headers, employee):
        """Test the date range filter is inclusive."""
        headers = auth_headers(employee)
        client.post("/api/time-entries", json=entry_payload("09:00", "12:00"), headers=headers)

        inside = client.get("/api/time-entries?startDate=2024-01-15&endDate=2024-01-15", headers=headers)
        outside = client.get("/api/time-entries?startDate=2024-01-16", headers=headers)

        assert len(inside.json()) == 1
        assert outside.json() == []

    def test_balance(self, client, auth_headers, employee):
        """Test the balance has all four windows."""
        response = client.get("/api/balance", headers=auth_headers(employee))

        assert response.status_code == 200
        body = response.json()
        assert body["userId"] == employee.id
        for window in ("today", "week", "month", "total"):
            assert set(body[window]) == {"workedHours", "targetHours", "balance", "label"}


class TestReportsAPI:
    """Test cases for report data and exports."""

    def create_entries(self, client, headers):
        client.post("/api/time-entries", json=entry_payload("09:00", "17:00", breakMinutes=30), headers=headers)

    def test_report_data(self, client, auth_headers, employee):
        """Test employees get day groups without costs."""
        headers = auth_headers(employee)
        self.create_entries(client, headers)

        response = client.get(
            "/api/reports/data?startDate=2024-01-01&endDate=2024-01-31&groupBy=user", headers=headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body["groupBy"] == "day"
        assert body["isAdmin"] is False
        assert body["totalEntries"] == 1
        assert body["data"][0]["key"] == "2024-01-15"
        assert body["data"][0]["totalHours"] == 7.5
        assert body["data"][0]["totalCosts"] is None

    def test_admin_report_costs(self, client, auth_headers, employee, admin):
        """Test admins see all users with costs."""
        self.create_entries(client, auth_headers(employee))

        response = client.get(
            "/api/reports/data?startDate=2024-01-01&endDate=2024-01-31&groupBy=user", headers=auth_headers(admin)
        )

        body = response.json()
        assert body["groupBy"] == "user"
        assert body["data"][0]["key"] == "Anna Schmidt"
        assert body["data"][0]["totalCosts"] == 150.0
        assert body["summary"]["total_costs"] == 150.0

    def test_missing_dates(self, client, auth_headers, employee):
        """Test the date range is required."""
        response = client.get("/api/reports/data?startDate=2024-01-01", headers=auth_headers(employee))

        assert response.status_code == 400

    def test_reversed_dates(self, client, auth_headers, employee):
        """Test an end before the start is rejected."""
        response = client.get(
            "/api/reports/data?startDate=2024-02-01&endDate=2024-01-01", headers=auth_headers(employee)
        )

        assert response.status_code == 400

    def test_csv_export(self, client, auth_headers, employee):
        """Test the CSV download and its headers."""
        headers = auth_headers(employee)
        self.create_entries(client, headers)

        response = client.get(
            "/api/reports/export?startDate=2024-01-01&endDate=2024-01-31&format=csv", headers=headers
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert 'filename="report_day_2024-01-01_2024-01-31.csv"' in response.headers["content-disposition"]
        rows = list(csv.reader(io.StringIO(response.text)))
        assert rows == [["Period", "TotalHours", "EntryCount"], ["2024-01-15", "7.50", "1"]]

    def test_employee_export_ignores_costs(self, client, auth_headers, employee):
        """Test includeCosts has no effect for employees."""
        headers = auth_headers(employee)
        self.create_entries(client, headers)

        response = client.get(
            "/api/reports/export?startDate=2024-01-01&endDate=2024-01-31&includeCosts=true&detailed=true",
            headers=headers
        )

        header = next(csv.reader(io.StringIO(response.text)))
        assert "Cost" not in header
        assert header[0] == "Date"

    def test_unknown_format(self, client, auth_headers, employee):
        """Test unsupported export formats are rejected."""
        response = client.get(
            "/api/reports/export?startDate=2024-01-01&endDate=2024-01-31&format=docx",
            headers=auth_headers(employee)
        )

        assert response.status_code == 400
