"""Controllers served by the auth server, in registration order.

The order is fixed: Secure, Private, Public, Saml. Each controller owns a
disjoint path prefix and registers its own routes.
"""

from src.api.controllers.base import Controller
from src.api.controllers.private import PrivateController
from src.api.controllers.public import PublicController
from src.api.controllers.saml import SamlController
from src.api.controllers.secure import SecureController

CONTROLLERS: tuple[type[Controller], ...] = (
    SecureController,
    PrivateController,
    PublicController,
    SamlController,
)

__all__ = [
    "CONTROLLERS",
    "Controller",
    "PrivateController",
    "PublicController",
    "SamlController",
    "SecureController",
]
