"""Service registry.

Each process in this repository runs exactly one of the services below.
A service is only a name, a label for the startup log line and the port
it binds by default.
"""

from dataclasses import dataclass


class UnknownServiceError(LookupError):
    """Raised when a service name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        choices = ", ".join(sorted(SERVICES))
        super().__init__(f"Unknown service '{name}'. Expected one of: {choices}")


@dataclass(frozen=True)
class ServiceDefinition:
    name: str
    display_name: str
    default_port: int

    def startup_message(self, port: int) -> str:
        return f"{self.display_name} running on port {port}"


API_GATEWAY = ServiceDefinition("api-gateway", "API Service", 8080)
GPTCLIENT_SERVICE = ServiceDefinition("gptclient-service", "GPTClient Service", 8081)
SHORTSTORIES_SERVICE = ServiceDefinition(
    "shortstories-service", "Shortstories Service", 8082
)
QUIZ_SERVICE = ServiceDefinition("quiz-service", "quiz Service", 8083)

SERVICES: dict[str, ServiceDefinition] = {
    service.name: service
    for service in (API_GATEWAY, GPTCLIENT_SERVICE, SHORTSTORIES_SERVICE, QUIZ_SERVICE)
}


def get_service(name: str) -> ServiceDefinition:
    """Look up a service by name.

    Raises:
        UnknownServiceError: If no service is registered under ``name``.
    """
    try:
        return SERVICES[name]
    except KeyError:
        raise UnknownServiceError(name) from None


__all__ = [
    "API_GATEWAY",
    "GPTCLIENT_SERVICE",
    "QUIZ_SERVICE",
    "SERVICES",
    "SHORTSTORIES_SERVICE",
    "ServiceDefinition",
    "UnknownServiceError",
    "get_service",
]
