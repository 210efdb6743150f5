"""Engine module that binds itself into the shared namespace on import."""

from sqlshim.core.namespace import shared_namespace


class _Engine:
    pass


ENGINE = _Engine()

shared_namespace.bind("SQL", ENGINE)
