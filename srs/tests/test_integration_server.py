import pytest
import requests
import uuid
import logging
from datetime import date, timedelta

BASE_URL = "http://127.0.0.1:8000"
logger = logging.getLogger(__name__)


def sign_up():
    """Register a throwaway account and return its bearer token"""
    email = f"live-{uuid.uuid4().hex[:12]}@example.com"
    password = "live-password"
    r = requests.post(f"{BASE_URL}/auth/register", json={"email": email, "password": password})
    assert r.status_code == 201
    r = requests.post(f"{BASE_URL}/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200
    return r.json()["token"]


def post_review(token, kanji, grade):
    """Helper for POST /api/srs/review/<kanji>"""
    r = requests.post(
        f"{BASE_URL}/api/srs/review/{kanji}",
        json={"grade": grade},
        headers={"Authorization": f"Bearer {token}"},
    )
    logger.info(
        "POST /api/srs/review/%s grade=%s → status=%s body=%s",
        kanji,
        grade,
        r.status_code,
        r.text,
    )
    return r


def get_state(token, kanji):
    r = requests.get(
        f"{BASE_URL}/api/srs/review/{kanji}",
        headers={"Authorization": f"Bearer {token}"},
    )
    return r


@pytest.mark.integration
def test_perfect_reviews_progress_live():
    """grade=5 three times → repetition 1, 2, 3 with intervals 1, 6, 17"""
    token = sign_up()
    intervals = []
    for _ in range(3):
        assert post_review(token, "日", 5).status_code == 200
        intervals.append(get_state(token, "日").json()["interval"])

    assert intervals == [1, 6, 17]
    logger.info("✓ Passed: progression %s", intervals)


@pytest.mark.integration
def test_lapse_resets_live():
    token = sign_up()
    post_review(token, "月", 5)
    post_review(token, "月", 5)
    post_review(token, "月", 0)

    d = get_state(token, "月").json()
    assert d["repetition"] == 0
    assert d["interval"] == 1
    assert d["ease_factor"] == pytest.approx(1.9)


@pytest.mark.integration
def test_invalid_grade_rejected_live():
    token = sign_up()
    r = post_review(token, "日", 6)
    assert r.status_code == 400
    assert get_state(token, "日").json()["repetition"] == 0


@pytest.mark.integration
def test_due_list_live():
    token = sign_up()
    post_review(token, "火", 0)
    tomorrow = date.today() + timedelta(days=1)

    r = requests.get(
        f"{BASE_URL}/api/srs/due",
        params={"on": (tomorrow + timedelta(days=1)).isoformat()},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert r.status_code == 200
    assert "火" in [k["kanji"] for k in r.json()["kanji"]]
