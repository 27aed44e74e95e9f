import logging

from trailhub.models import AuthResponse, LoginCredentials, RegisterData, User

from .client import ApiClient, Endpoint, unwrap


class AuthService:
    def __init__(self, client: ApiClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def login(self, credentials: LoginCredentials) -> User:
        body = await self.client.post(Endpoint.AUTH_LOGIN, json=credentials.to_payload())
        return self._start_session(body)

    async def register(self, data: RegisterData) -> User:
        body = await self.client.post(Endpoint.AUTH_REGISTER, json=data.to_payload())
        return self._start_session(body)

    def logout(self) -> None:
        self.client.session.logout()

    async def me(self) -> User:
        body = await self.client.get(Endpoint.AUTH_ME)
        user = User.model_validate(unwrap(body))
        self.client.session.user = user
        return user

    def _start_session(self, body: object) -> User:
        auth = AuthResponse.model_validate(unwrap(body))
        self.client.session.start(auth.token.get_secret_value(), auth.user)
        self.logger.info(f"Logged in as {auth.user.email} ({auth.user.role})")
        return auth.user
