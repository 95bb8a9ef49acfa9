"""Exceptions raised while sampling and caching host information."""


class ClientInfoError(Exception):
    """Base class for app_client_info errors."""


class SampleError(ClientInfoError):
    """An InfoProvider could not read host state."""


class SampleFailure(ClientInfoError):
    """InfoCache could not populate its slot; nothing was cached."""
