import logging

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from jose import jwt as jose_jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .actors import Actor, Admin, actor_for
from .config import Settings
from .database import get_db
from .models import User
from .shared.validators import validate_email

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def decode_access_token(token: str, settings: Settings) -> dict:
    """
    Verify and decode a bearer token issued by the identity service.

    Raises:
        HTTPException 401 if the signature, expiry or claims are invalid
    """
    try:
        payload = jose_jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.warning(f"⚠️ JWT verification failed: {e}")
        raise HTTPException(status_code=401, detail="Invalid or expired token") from e

    if not payload.get("userId") or not payload.get("role"):
        logger.error(f"❌ Token missing claims. Available claims: {list(payload.keys())}")
        raise HTTPException(status_code=401, detail="Invalid token claims")
    return payload


def sync_user(db: Session, payload: dict) -> User:
    """
    Find or create the local user row for a verified token.

    Salons and bookings reference users by id, and notifications are addressed
    through them, so every authenticated caller gets a row mirroring its claims.
    """
    user_id = str(payload["userId"])
    role = payload["role"]
    try:
        email = validate_email(payload.get("email"))
    except ValueError:
        logger.warning(f"⚠️ Token for user {user_id} carries an invalid email claim")
        email = None
    firstname = payload.get("firstname") or payload.get("name")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        logger.info(f"🆕 Creating user {user_id} from token claims")
        user = User(id=user_id, email=email, role=role, firstname=firstname or "")
        db.add(user)
    else:
        if user.role == role and (not email or user.email == email) and (
            not firstname or user.firstname == firstname
        ):
            return user
        user.role = role
        if email:
            user.email = email
        if firstname:
            user.firstname = firstname

    try:
        db.commit()
        db.refresh(user)
    except IntegrityError as e:
        db.rollback()
        logger.error(f"❌ Email {email} already belongs to another user")
        raise HTTPException(
            status_code=409,
            detail="This email is already registered to another account.",
        ) from e
    return user


async def get_current_actor(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db),
) -> Actor:
    """Resolve the acting user from the Authorization header"""
    if not credentials:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated. Please provide a valid Bearer token in the Authorization header.",
        )

    payload = decode_access_token(credentials.credentials, settings)
    try:
        actor = actor_for(str(payload["userId"]), payload["role"])
    except ValueError as e:
        logger.warning(f"⚠️ Token carries unknown role: {payload.get('role')}")
        raise HTTPException(status_code=401, detail="Invalid token claims") from e

    sync_user(db, payload)
    return actor


async def require_admin(actor: Actor = Depends(get_current_actor)) -> Admin:
    if not isinstance(actor, Admin):
        raise HTTPException(
            status_code=403,
            detail="Forbidden: You do not have permission to access this resource",
        )
    return actor
