"""OpenAPI description of the administrator token."""

from drf_spectacular.extensions import OpenApiAuthenticationExtension  # type: ignore

from .authentication import ADMIN_TOKEN_HEADER


class AdminTokenScheme(OpenApiAuthenticationExtension):
    target_class = "apps.administration.authentication.AdminTokenAuthentication"
    name = "AdminToken"

    def get_security_definition(self, auto_schema):  # type: ignore
        return {"type": "apiKey", "in": "header", "name": ADMIN_TOKEN_HEADER}
