"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

SUPPORTED_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class AppSettings:
    """Settings for the dashboard and its persistence backend.

    Attributes:
        backend: Repository backend identifier (sqlalchemy or memory).
        environment: Deployment environment name.
        default_user_id: User shown when the dashboard opens.
        currency_code: Currency used when formatting amounts.
    """

    backend: str = "sqlalchemy"
    environment: str = "production"
    default_user_id: str | None = None
    currency_code: str = "USD"

    @property
    def strict_account_types(self) -> bool:
        """Whether unknown account types should fail loudly."""
        return self.environment == "development"

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables.

        Returns:
            AppSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If FINANCE_BACKEND names an unsupported backend.
        """
        dotenv.load_dotenv()
        backend = os.getenv("FINANCE_BACKEND", "sqlalchemy").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                "Unsupported finance backend: "
                f"{backend}. Expected sqlalchemy or memory."
            )
        environment = os.getenv("APP_ENV", "production").strip().lower()
        default_user_id = os.getenv("DASHBOARD_USER_ID", "").strip() or None
        currency_code = os.getenv("CURRENCY_CODE", "USD").strip().upper()
        return cls(
            backend=backend,
            environment=environment or "production",
            default_user_id=default_user_id,
            currency_code=currency_code or "USD",
        )


__all__ = ["AppSettings", "SUPPORTED_BACKENDS"]
