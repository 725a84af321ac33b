"""Bearer token resolution: turns an ``Authorization`` header into a Principal.

Tokens are issued elsewhere; this module only verifies the signature and
expiry and reads the subject and role claims.
"""

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from movieflix.config import settings
from movieflix.services.auth import Principal

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def decode_principal(token: str) -> Principal | None:
    """Return the token's Principal, or None if the token is not acceptable."""
    try:
        claims = jwt.decode(
            token, settings.jwt_secret_key.get_secret_value(), algorithms=[settings.jwt_algorithm]
        )
    except JWTError as exc:
        logger.info("Rejected bearer token: %s", exc)
        return None

    subject = claims.get("sub") or claims.get("user_name")
    if not subject:
        logger.info("Rejected bearer token without subject")
        return None

    role_names = claims.get("authorities") or claims.get("roles") or []
    if isinstance(role_names, str):
        role_names = [role_names]
    elif not isinstance(role_names, list):
        role_names = []
    return Principal.of(str(subject), [name for name in role_names if isinstance(name, str)])


def get_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Principal | None:
    if credentials is None:
        return None
    return decode_principal(credentials.credentials)
