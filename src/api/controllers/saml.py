"""SAML service provider endpoints."""

from fastapi import APIRouter

from src.api.controllers.base import Controller


class SamlController(Controller):
    """Routes used by SAML identity providers."""

    prefix = "/saml"

    def build_router(self) -> APIRouter:
        router = APIRouter()
        base_url = f"{self.settings.domain.rstrip('/')}{self.prefix}"

        @router.get("/metadata")
        async def metadata() -> dict[str, str]:
            """Describe this service provider to identity providers.

            Returns:
                dict[str, str]: Entity ID and assertion consumer service URL.
            """
            return {
                "entity_id": f"{base_url}/metadata",
                "assertion_consumer_service_url": f"{base_url}/acs",
            }

        return router
