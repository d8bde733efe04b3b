"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules for one aggregate and talk to its
    repository.
    """

    pass
