"""
Bearer token validation and the authorization hook.

Tokens are JSON Web Tokens signed with HMAC-SHA256 and base64url
encoded.  Validation checks the signature, the ``exp`` timestamp and
the ``iss``/``aud`` claims against ``Settings``.

Authorization is a plain predicate over the decoded claims.  The
application stores one on ``app.state.authorization_policy`` and the
``require_authorization`` dependency evaluates it before a handler
runs.  Services never look at claims themselves.
"""

import base64
import hashlib
import hmac
import json
import time
from typing import Callable, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import Settings

AuthorizationPolicy = Callable[[Dict[str, object]], bool]

SUPERUSER_CLAIM = "SuperUser"


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    settings: Settings,
    claims: Dict[str, object],
    expires_delta: Optional[int] = None,
) -> str:
    """Create a signed token carrying ``claims``.

    ``iss``, ``aud`` and ``exp`` are filled in from ``settings`` unless
    the caller supplies them.  ``expires_delta`` is the lifetime in
    seconds and defaults to ``settings.access_token_expire_minutes``.
    """
    to_encode = dict(claims)
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode.setdefault("exp", int(time.time()) + exp_seconds)
    to_encode.setdefault("iss", settings.token_issuer)
    to_encode.setdefault("aud", settings.token_audience)
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.token_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(settings: Settings, token: str) -> Optional[Dict[str, object]]:
    """Verify and decode a token.

    Returns the claims if the signature matches and the token is
    neither expired nor issued for another issuer or audience,
    otherwise ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        actual_sig = _b64_url_decode(signature_b64)
        expected_sig = _sign(signing_input, settings.token_key)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    try:
        if data.get("exp") is None or int(data["exp"]) < int(time.time()):
            return None
    except (TypeError, ValueError):
        return None
    if data.get("iss") != settings.token_issuer:
        return None
    if data.get("aud") != settings.token_audience:
        return None
    return data


def superuser_policy(claims: Dict[str, object]) -> bool:
    """Allow callers whose token carries ``SuperUser: "True"``."""
    return str(claims.get(SUPERUSER_CLAIM)) == "True"


security = HTTPBearer(auto_error=False)


def require_authorization(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[Dict[str, object]]:
    """Dependency guarding mutating endpoints.

    Raises 401 when the bearer token is missing or invalid and 403 when
    the application's authorization policy rejects the claims.  Returns
    the claims, or ``None`` when authorization is disabled.
    """
    settings: Settings = request.app.state.settings
    if not settings.auth_enabled:
        return None
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    claims = decode_access_token(settings, credentials.credentials)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    policy: AuthorizationPolicy = request.app.state.authorization_policy
    if not policy(claims):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient permissions",
        )
    return claims
