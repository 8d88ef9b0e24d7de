"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from profitlens.domain.constants import DEFAULT_CURRENCY, DEFAULT_TOP_CATEGORIES
from profitlens.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AppSettings:
    """Application settings.

    Attributes:
        db_url: Optional database URL; None uses the local SQLite file.
        currency_code: Currency of all amounts.
        top_categories: Expense categories shown on the dashboard.
    """

    db_url: str | None = None
    currency_code: str = DEFAULT_CURRENCY
    top_categories: int = DEFAULT_TOP_CATEGORIES

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            AppSettings: Settings sourced from the environment.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        db_url = os.getenv("PROFITLENS_DB_URL") or None
        currency_code = (
            os.getenv("PROFITLENS_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        top_categories = cls._parse_top_categories(
            os.getenv("PROFITLENS_TOP_CATEGORIES"),
            logger=logger,
        )
        return cls(
            db_url=db_url,
            currency_code=currency_code,
            top_categories=top_categories,
        )

    @staticmethod
    def _parse_top_categories(raw: str | None, logger) -> int:
        """Parse the dashboard category count.

        Args:
            raw: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Parsed positive count, or the default when invalid.
        """
        if not raw:
            return DEFAULT_TOP_CATEGORIES
        try:
            value = int(raw)
        except ValueError:
            value = 0
        if value < 1:
            logger.warning(
                f"Invalid PROFITLENS_TOP_CATEGORIES '{raw}'. "
                f"Using {DEFAULT_TOP_CATEGORIES}."
            )
            return DEFAULT_TOP_CATEGORIES
        return value


__all__ = ["AppSettings"]
