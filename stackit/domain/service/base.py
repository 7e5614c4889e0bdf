"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span questions, answers and votes
    and talk to the repositories on behalf of the application layer.
    """

    pass
