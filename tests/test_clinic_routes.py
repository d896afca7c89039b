"""
Integration tests for the clinic queue endpoints
"""

from fastapi import status

from tests.utils import read_json, write_json


class TestGetAppointments:
    def test_returns_queue_verbatim(self, client, queue_file):
        queue = [{"id": 1, "name": "Alice", "time": "09:30"}, {"id": 2, "name": "Bob"}]
        write_json(queue_file, queue)

        response = client.get("/appointments")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == queue

    def test_missing_file_is_generic_500(self, client):
        response = client.get("/appointments")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to read appointments file"}

    def test_corrupt_file_is_generic_500(self, client, queue_file):
        queue_file.write_text("[{", encoding="utf-8")

        response = client.get("/appointments")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to read appointments file"}

    def test_nan_in_file_is_generic_500(self, client, queue_file):
        queue_file.write_text('[{"id": 1, "wait": NaN}]', encoding="utf-8")

        response = client.get("/appointments")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to read appointments file"}


class TestSaveEndpoints:
    def test_save_appointment_recovers_from_undecodable_reports(self, client, reports_file):
        reports_file.write_bytes(b'[{"id": 1, "n": "\xff\xfe"}')

        response = client.post("/save-appointment", json={"diagnosis": "Flu"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Appointment saved successfully"}
        assert read_json(reports_file) == [{"diagnosis": "Flu", "id": 1}]

    def test_save_report_appends_to_queue(self, client, queue_file, reports_file):
        write_json(queue_file, [])

        response = client.post("/save-report", json={"name": "Alice"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Appointment saved successfully"}
        saved = read_json(queue_file)
        assert saved == [{"name": "Alice", "id": 1}]
        assert list(saved[0]) == ["name", "id"]
        assert not reports_file.exists()

    def test_save_appointment_appends_to_reports(self, client, queue_file, reports_file):
        write_json(reports_file, [{"id": 1}, {"id": 3}, {"id": 5}])

        response = client.post("/save-appointment", json={"diagnosis": "Flu"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Appointment saved successfully"}
        assert read_json(reports_file)[-1] == {"diagnosis": "Flu", "id": 6}
        assert not queue_file.exists()

    def test_save_appointment_recovers_from_corrupt_reports(self, client, reports_file):
        reports_file.write_text("garbage", encoding="utf-8")

        response = client.post("/save-appointment", json={"diagnosis": "Flu"})

        assert response.status_code == status.HTTP_200_OK
        assert read_json(reports_file) == [{"diagnosis": "Flu", "id": 1}]

    def test_save_report_creates_missing_queue(self, client, queue_file):
        response = client.post("/save-report", json={"name": "Bob"})

        assert response.status_code == status.HTTP_200_OK
        assert read_json(queue_file) == [{"name": "Bob", "id": 1}]

    def test_write_failure_is_generic_500(self, client, store, tmp_path):
        store.data_dir = tmp_path / "does-not-exist"

        response = client.post("/save-report", json={"name": "Carol"})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Failed to save appointment"}


class TestAttendPatient:
    def test_moves_patient_to_attended(self, client, queue_file, attended_file):
        write_json(queue_file, [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}])
        write_json(attended_file, [])
        patient = {"id": 1, "name": "Alice", "notes": "seen"}

        response = client.post("/attend-patient", json={"patient": patient})

        assert response.status_code == status.HTTP_200_OK
        assert response.text == "Patient moved to attended list"
        assert response.headers["content-type"].startswith("text/plain")
        assert read_json(queue_file) == [{"id": 2, "name": "Bob"}]
        assert read_json(attended_file) == [patient]

    def test_unknown_id_still_appends(self, client, queue_file, attended_file):
        write_json(queue_file, [{"id": 2}])
        write_json(attended_file, [{"id": 9}])

        response = client.post("/attend-patient", json={"patient": {"id": 5}})

        assert response.status_code == status.HTTP_200_OK
        assert read_json(queue_file) == [{"id": 2}]
        assert read_json(attended_file) == [{"id": 9}, {"id": 5}]

    def test_missing_patient_is_500(self, client, queue_file, attended_file):
        write_json(queue_file, [{"id": 1}])
        write_json(attended_file, [])

        response = client.post("/attend-patient", json={})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Error processing patient"
        assert read_json(queue_file) == [{"id": 1}]

    def test_array_body_is_500(self, client, queue_file, attended_file):
        write_json(queue_file, [{"id": 1}])
        write_json(attended_file, [])

        response = client.post("/attend-patient", json=[{"patient": {"id": 1}}])

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Error processing patient"
        assert read_json(queue_file) == [{"id": 1}]
        assert read_json(attended_file) == []

    def test_no_body_is_500(self, client):
        response = client.post("/attend-patient")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Error processing patient"

    def test_missing_attended_file_is_500_after_queue_rewrite(self, client, queue_file):
        write_json(queue_file, [{"id": 1}, {"id": 2}])

        response = client.post("/attend-patient", json={"patient": {"id": 1}})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Error processing patient"
        assert read_json(queue_file) == [{"id": 2}]


def test_cors_allows_any_origin(client):
    response = client.options(
        "/appointments",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["access-control-allow-origin"] in ("*", "http://localhost:3000")
