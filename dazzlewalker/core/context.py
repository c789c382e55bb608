"""Walker context objects.

A context is an arbitrary value shared by every walker of one tree. It is
how host code hands services (a database session, a locale, a request)
down to the definitions that discover children.
"""


class WalkerContext:
    """Marker base class for walker contexts.

    Subclass it to carry whatever your definitions need.
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class EmptyWalkerContext(WalkerContext):
    """Context used when ``build()`` is given none."""
    pass
