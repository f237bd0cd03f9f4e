"""
Dependencies for FastAPI routes
"""
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from hotel_console.jwt_utils import is_token_expired
from hotel_console.session import ConsoleSession, sessions
from hotel_console.wizard import RegistrationWizard

security = HTTPBearer()


async def get_bearer_token(credentials: HTTPAuthorizationCredentials = Depends(security)) -> str:
    """
    Get the Hotel API credential from the Authorization header.

    Expects: Authorization: Bearer <token>
    """
    token = credentials.credentials

    if is_token_expired(token):
        sessions.close(token)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired. Please login again.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return token


async def get_current_session(token: str = Depends(get_bearer_token)) -> ConsoleSession:
    """Get the console session opened at login for this credential"""
    session = sessions.get(token)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No active console session. Please login again.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session


async def get_current_wizard(session: ConsoleSession = Depends(get_current_session)) -> RegistrationWizard:
    """Get the registration wizard of the current session"""
    if session.wizard is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No hotel registration in progress. Start the registration first."
        )
    return session.wizard
