"""Fakes and request helpers shared by the API tests"""

from typing import Dict, List, Optional

from fastapi.testclient import TestClient

from app.core.exceptions import FetchError
from app.db.database import SessionLocal
from app.infrastructure.external_services.email_service import EmailService
from app.infrastructure.orm.user_model import UserModel


class RecordingEmailService(EmailService):
    """Pretends SMTP is configured and keeps every message instead of sending it"""

    def __init__(self):
        super().__init__()
        self.sent: List[Dict] = []

    @property
    def enabled(self) -> bool:
        return True

    async def send_email(self, to_email, subject, html_content, text_content=None, reply_to=None) -> bool:
        self.sent.append({
            "to": to_email,
            "subject": subject,
            "html": html_content,
            "text": text_content,
            "reply_to": reply_to,
        })
        return True


class FakePageFetcher:

    def __init__(self):
        self.pages: Dict[str, str] = {}
        self.failures: Dict[str, str] = {}
        self.requested: List[str] = []

    async def fetch(self, url: str) -> str:
        self.requested.append(url)
        if url in self.failures:
            raise FetchError(self.failures[url])
        return self.pages.get(url, "<html><head><title>Untitled</title></head></html>")


class FakeStorageService:

    def __init__(self):
        self.objects: Dict[str, bytes] = {}

    async def upload_file(self, file_data: bytes, object_name: str, content_type: str) -> str:
        self.objects[object_name] = file_data
        return f"http://storage.test/listings-bucket/{object_name}"


def register(client: TestClient,
             email: str = "alice@example.com",
             username: str = "alice",
             password: str = "password123"):
    return client.post("/auth/register", json={
        "email": email,
        "username": username,
        "password": password,
    })


def login(client: TestClient, email: str = "alice@example.com", password: str = "password123"):
    return client.post("/auth/login", json={"email": email, "password": password})


def update_user(email: str, **fields) -> None:
    db = SessionLocal()
    try:
        user = db.query(UserModel).filter(UserModel.email == email).one()
        for key, value in fields.items():
            setattr(user, key, value)
        db.commit()
    finally:
        db.close()


def create_listing(client: TestClient, **overrides) -> Dict:
    payload = {
        "title": "Acme Shop",
        "url": "https://acme.example.com",
        "description": "A profitable store selling widgets.",
        "category": "ecommerce",
        "asking_price": 5000,
        "age_months": 24,
        "reason_for_selling": "Moving on to other projects.",
        "monthly_revenue": 400,
    }
    payload.update(overrides)
    response = client.post("/listings", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def user_id(email: str) -> Optional[int]:
    db = SessionLocal()
    try:
        user = db.query(UserModel).filter(UserModel.email == email).first()
        return user.id if user else None
    finally:
        db.close()
