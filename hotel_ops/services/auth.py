"""Login, registration and logout"""

import logging

from ..core.session import Session
from ..models.auth import AuthResponse, LoginCredentials, RegisterData
from .gateway import GatewayClient

logger = logging.getLogger(__name__)


class AuthService:
    """Auth API bound to the gateway's session state"""

    def __init__(self, gateway: GatewayClient):
        self.gateway = gateway

    async def login(self, credentials: LoginCredentials) -> Session:
        """Exchange email/password for a token and start a session"""
        data = await self.gateway.auth(
            "POST",
            "/token",
            params={"grant_type": "password"},
            body={"email": credentials.email, "password": credentials.password},
        )
        grant = self.gateway.decode(AuthResponse, data)
        return self.gateway.session.start(
            grant.access_token,
            grant.user.model_dump(mode="json"),
        )

    async def register(self, data: RegisterData) -> Session:
        """Sign up, then log in with the same credentials"""
        await self.gateway.auth(
            "POST",
            "/signup",
            body={
                "email": data.email,
                "password": data.password,
                "data": {
                    "firstName": data.first_name,
                    "lastName": data.last_name,
                },
            },
        )
        logger.info(f"Registered {data.email}")
        return await self.login(LoginCredentials(email=data.email, password=data.password))

    async def logout(self) -> None:
        """Revoke the token server-side and end the local session"""
        session = self.gateway.session
        if not session.is_authenticated:
            return
        try:
            await self.gateway.auth("POST", "/logout", with_session=True)
        finally:
            session.end()
