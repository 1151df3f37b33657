"""Fakes and builders shared by the test modules."""

from typing import Any, Dict, Optional

import mongomock
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.services.identity import InvalidCredential


class FakeVerifier:
    """Maps literal tokens to claim sets; anything else is rejected."""

    def __init__(self, tokens: Optional[Dict[str, Dict[str, Any]]] = None):
        self.tokens = dict(tokens or {})
        self.closed = False

    def add(self, token: str, email: Optional[str], name: Optional[str] = None) -> str:
        claims: Dict[str, Any] = {"uid": token}
        if email is not None:
            claims["email"] = email
        if name is not None:
            claims["name"] = name
        self.tokens[token] = claims
        return token

    def verify(self, token: str) -> Dict[str, Any]:
        if token not in self.tokens:
            raise InvalidCredential("unknown token")
        return self.tokens[token]

    def close(self) -> None:
        self.closed = True


class FakeGateway:
    def __init__(self):
        self.amounts = []

    def create_intent(self, amount: float) -> str:
        self.amounts.append(amount)
        return f"pi_secret_{len(self.amounts)}"


def make_db():
    return mongomock.MongoClient()["ventech_test"]


def make_client(db=None, verifier=None, gateway=None):
    """Return ``(client, db, verifier, gateway)``; use the client as a context manager."""
    db = db if db is not None else make_db()
    verifier = verifier or FakeVerifier()
    gateway = gateway or FakeGateway()
    app = create_app(
        Settings(API_PREFIX="/api/v1", CORS_ORIGINS=["http://testserver"]),
        db=db,
        identity_verifier=verifier,
        payment_gateway=gateway,
    )
    return TestClient(app), db, verifier, gateway


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def insert_user(db, email: str, **fields) -> Dict[str, Any]:
    doc = {
        "email": email,
        "name": email.split("@")[0],
        "role": "customer",
        "status": "active",
        "roleRequest": None,
        "loginCount": 0,
    }
    doc.update(fields)
    result = db.users.insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc
