"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the trust rules that span several aggregates
    (claims and workspaces, invite links and memberships).
    """

    pass
