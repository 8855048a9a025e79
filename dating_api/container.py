# dating_api/container.py
from dependency_injector import containers, providers

from dating_api.config import get_settings
from dating_api.security.tokens import TokenService


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Process-wide collaborators live here; request-scoped ones (DB session,
    repositories, services) are assembled in ``dating_api.dependencies``.
    """

    wiring_config = containers.WiringConfiguration(
        modules=["dating_api.dependencies"],
    )

    # 1. Configuration
    # Resolved lazily so tests can swap it with set_settings() or override().
    settings = providers.Singleton(get_settings)

    # 2. Security (Singleton: one signing key per process)
    token_service = providers.Singleton(
        TokenService,
        secret_key=settings.provided.TOKEN_KEY,
        algorithm=settings.provided.TOKEN_ALGORITHM,
        expires_minutes=settings.provided.TOKEN_EXPIRE_MINUTES,
    )
