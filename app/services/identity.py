"""Bearer credential verification and first-sight account provisioning."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple

import firebase_admin
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from pymongo.database import Database

from app.core.errors import Unauthenticated
from app.models.entities.user import User
from app.repositories.user import UserRepository, normalize_email

logger = logging.getLogger(__name__)


class InvalidCredential(Exception):
    """Raised by a verifier when a token cannot be trusted."""


class IdentityVerifier(Protocol):
    def verify(self, token: str) -> Dict[str, Any]: ...

    def close(self) -> None: ...


class FirebaseIdentityVerifier:
    """Verifies Firebase ID tokens on a dedicated, explicitly managed app."""

    APP_NAME = "ventech-api"

    def __init__(
        self,
        credentials_file: Optional[str] = None,
        project_id: Optional[str] = None,
    ):
        cred = (
            credentials.Certificate(credentials_file)
            if credentials_file
            else credentials.ApplicationDefault()
        )
        options = {"projectId": project_id} if project_id else None
        self._app = firebase_admin.initialize_app(cred, options, name=self.APP_NAME)
        logger.info("Firebase Admin initialized", extra={"project_id": project_id})

    def verify(self, token: str) -> Dict[str, Any]:
        try:
            return firebase_auth.verify_id_token(token, app=self._app)
        except (
            ValueError,
            firebase_auth.InvalidIdTokenError,
            firebase_auth.UserDisabledError,
            firebase_auth.CertificateFetchError,
        ) as exc:
            raise InvalidCredential(str(exc)) from exc

    def close(self) -> None:
        firebase_admin.delete_app(self._app)


@dataclass(frozen=True)
class VerifiedIdentity:
    email: str
    display_name: Optional[str]
    claims: Dict[str, Any]


class IdentityResolver:
    def __init__(self, db: Database, verifier: IdentityVerifier):
        self.users = UserRepository(db)
        self.verifier = verifier

    def verify(self, token: Optional[str]) -> VerifiedIdentity:
        if not token or not token.strip():
            raise Unauthenticated("No token provided")

        try:
            claims = self.verifier.verify(token)
        except InvalidCredential as exc:
            logger.warning("Token verification failed: %s", exc)
            raise Unauthenticated("Invalid or expired token")

        email = claims.get("email")
        if not email:
            raise Unauthenticated("Token missing email")

        email = normalize_email(email)
        display_name = claims.get("name") or email.split("@")[0]
        return VerifiedIdentity(email=email, display_name=display_name, claims=claims)

    def resolve(self, token: Optional[str]) -> Tuple[VerifiedIdentity, User]:
        identity = self.verify(token)
        user = self.users.record_login(identity.email, identity.display_name)
        return identity, user


__all__ = [
    "FirebaseIdentityVerifier",
    "IdentityResolver",
    "IdentityVerifier",
    "InvalidCredential",
    "VerifiedIdentity",
]
