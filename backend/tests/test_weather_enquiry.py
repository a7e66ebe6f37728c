"""
Tests de la météo (OpenWeatherMap) et des demandes de renseignements (SMTP), transports simulés.
"""
import smtplib
from urllib.error import URLError

from tourcms import config
from tourcms.services import weather


OWM_PAYLOAD = {
    "name": "Dehradun",
    "main": {"temp": 24.5},
    "weather": [{"description": "haze", "icon": "50d"}],
}


def test_weather_returns_conditions(client, monkeypatch):
    calls = []

    def fake_fetch(url, timeout):
        calls.append(url)
        return OWM_PAYLOAD

    monkeypatch.setattr(config, "OWM_KEY", "test-key")
    monkeypatch.setattr(weather, "fetch_json", fake_fetch)

    response = client.get("/api/weather")
    assert response.status_code == 200
    assert response.json() == {
        "city": "Dehradun",
        "temperature": 24.5,
        "climate_description": "haze",
        "icon": "50d",
    }
    assert "q=Dehradun" in calls[0]
    assert "units=metric" in calls[0]
    assert "appid=test-key" in calls[0]


def test_weather_city_parameter(client, monkeypatch):
    monkeypatch.setattr(config, "OWM_KEY", "test-key")
    monkeypatch.setattr(weather, "fetch_json", lambda url, timeout: {**OWM_PAYLOAD, "name": "Leh"})
    assert client.get("/api/weather", params={"city": "Leh"}).json()["city"] == "Leh"


def test_weather_without_key_is_503(client, monkeypatch):
    monkeypatch.setattr(config, "OWM_KEY", "")
    response = client.get("/api/weather")
    assert response.status_code == 503
    assert response.json()["success"] is False


def test_weather_upstream_failure_is_502(client, monkeypatch):
    def broken(url, timeout):
        raise URLError("connection refused")

    monkeypatch.setattr(config, "OWM_KEY", "test-key")
    monkeypatch.setattr(weather, "fetch_json", broken)
    assert client.get("/api/weather").status_code == 502


class FakeSMTP:
    """Remplace smtplib.SMTP et garde les messages envoyés."""
    sent = []
    fail = False
    closed = 0

    def __init__(self, host, port, timeout=None):
        self.host = host
        self.port = port

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        FakeSMTP.closed += 1
        return False

    def starttls(self):
        pass

    def login(self, user, password):
        pass

    def send_message(self, msg):
        if FakeSMTP.fail:
            raise smtplib.SMTPException("mailbox unavailable")
        FakeSMTP.sent.append(msg)

    def quit(self):
        pass


def _configure_mail(monkeypatch):
    FakeSMTP.sent = []
    FakeSMTP.fail = False
    FakeSMTP.closed = 0
    monkeypatch.setattr(smtplib, "SMTP", FakeSMTP)
    monkeypatch.setattr(config, "ADMIN_EMAIL", "admin@example.com")
    monkeypatch.setattr(config, "SMTP_HOST", "smtp.example.com")
    monkeypatch.setattr(config, "SMTP_FROM_EMAIL", "noreply@example.com")


ENQUIRY = {
    "name": "Asha",
    "email": "asha@example.com",
    "phone": "+91 98765 43210",
    "packageName": "Kedarnath Trek",
    "persons": "2",
    "message": "Is May a good time?",
}


def test_enquiry_sends_email(client, monkeypatch):
    _configure_mail(monkeypatch)
    response = client.post("/api/enquiry", json=ENQUIRY)
    assert response.status_code == 200
    assert response.json()["success"] is True

    assert len(FakeSMTP.sent) == 1
    msg = FakeSMTP.sent[0]
    assert msg["To"] == "admin@example.com"
    assert msg["Subject"] == "New Enquiry for Kedarnath Trek"
    assert "Is May a good time?" in msg.get_payload()[0].get_payload()


def test_enquiry_missing_fields_is_400(client, monkeypatch):
    _configure_mail(monkeypatch)
    response = client.post("/api/enquiry", json={"name": "Asha", "email": "asha@example.com"})
    assert response.status_code == 400
    assert response.json()["message"].startswith("phone:")
    assert FakeSMTP.sent == []


def test_enquiry_without_configuration_is_500(client, monkeypatch):
    _configure_mail(monkeypatch)
    monkeypatch.setattr(config, "ADMIN_EMAIL", "")
    response = client.post("/api/enquiry", json=ENQUIRY)
    assert response.status_code == 500
    assert response.json()["message"] == "Server configuration error"


def test_enquiry_smtp_failure_is_500(client, monkeypatch):
    _configure_mail(monkeypatch)
    FakeSMTP.fail = True
    response = client.post("/api/enquiry", json=ENQUIRY)
    assert response.status_code == 500
    assert response.json()["success"] is False
    assert FakeSMTP.closed == 1


def test_enquiry_connection_closed_after_success(client, monkeypatch):
    _configure_mail(monkeypatch)
    assert client.post("/api/enquiry", json=ENQUIRY).status_code == 200
    assert FakeSMTP.closed == 1
