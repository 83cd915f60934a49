"""Base service class for domain services."""


class Service:
    """Marker base class for domain services.

    Services hold the rules that span a comment and its thread (parent
    lookups, cascades, previews) and talk to the store only through
    repository interfaces.
    """

    pass
