import pytest
from fastapi.testclient import TestClient

from config import Config
import main
from main import app
from profiles import enhanced_profile
from spam_detector import SpamDetector

client = TestClient(app)


@pytest.fixture(autouse=True)
def open_access(monkeypatch):
    monkeypatch.setattr(Config, "API_KEY", None)
    # independent of SPAM_PROFILE in the environment
    monkeypatch.setattr(main, "detector", SpamDetector(enhanced_profile()))


def analyze(message, headers=None):
    return client.post("/api/analyze", json={"message": message}, headers=headers or {})


def test_spam_message():
    response = analyze("FREE MONEY!!! Click here now!")
    assert response.status_code == 200
    data = response.json()
    assert data["isSpam"] is True
    assert data["confidencePercent"] == 100
    assert data["probabilityBand"] == "High spam probability"
    assert data["explanations"] == ["multiple high-risk indicators", "high spam keyword density"]
    assert data["features"]["hasExclamation"] is True
    assert data["profile"] == "enhanced"


def test_ham_message():
    data = analyze("Hello John, how are you today?").json()
    assert data["isSpam"] is False
    assert data["probabilityBand"] == "Uncertain"
    assert 1 <= len(data["explanations"]) <= 2


@pytest.mark.parametrize("message, detail", [
    (None, "Please enter a message to analyze!"),
    ("    ", "Please enter a message to analyze!"),
    ("a", "Message too short. Please enter at least 2 characters."),
    ("x" * 1001, "Message too long. Please limit to 1000 characters."),
    ("ab", "Analysis error: Text too short or invalid"),
    ("a! b? c.", "Analysis error: Text too short or invalid"),
])
def test_input_warnings(message, detail):
    response = analyze(message)
    assert response.status_code == 422
    assert response.json()["detail"] == detail


def test_api_key(monkeypatch):
    monkeypatch.setattr(Config, "API_KEY", "secret")
    assert analyze("FREE MONEY!!! Click here now!").status_code == 401
    assert analyze("FREE MONEY!!! Click here now!", {"x-api-key": "wrong"}).status_code == 401
    assert analyze("FREE MONEY!!! Click here now!", {"x-api-key": "secret"}).status_code == 200


def test_unexpected_error_is_generic(monkeypatch):
    def boom(text):
        raise RuntimeError("bug")
    monkeypatch.setattr(main.detector, "normalize_and_score", boom)
    response = analyze("FREE MONEY!!! Click here now!")
    assert response.status_code == 500
    assert response.json()["detail"] == "An error occurred during analysis."


def test_profile_endpoint():
    data = client.get("/api/profile").json()
    assert data == {
        "name": "enhanced",
        "threshold": 0.65,
        "minTextLength": 3,
        "maxTextLength": 1000,
        "maxTokens": 50,
    }


def test_health():
    assert client.get("/health").json()["status"] == "running"
