from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from config import Settings
import logging
import secrets

logger = logging.getLogger(__name__)

security = HTTPBasic()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def verify_credentials(
    credentials: HTTPBasicCredentials = Depends(security),
    settings: Settings = Depends(get_app_settings),
) -> str:
    username_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), settings.AUTH_USERNAME.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), settings.AUTH_PASSWORD.encode("utf-8")
    )
    if not (username_ok and password_ok):
        logger.warning("Rejected credentials for user %r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
