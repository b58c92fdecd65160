"""
Pydantic model for parsed adaptor specifiers.
"""

from pydantic import BaseModel


class AdaptorSpecifier(BaseModel):
    """An adaptor package reference such as ``@openfn/language-dhis2@1.2.3``."""

    name: str
    version: str | None = None

    @property
    def package(self) -> str:
        """Canonical npm package name of the adaptor."""
        return f"@openfn/language-{self.name}"
