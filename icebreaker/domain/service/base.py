"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold business rules that span an entity and its
    repository, such as uniqueness checks and soft deletion.
    """

    pass
