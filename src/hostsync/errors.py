"""hostsync - Error Types"""


class HostSyncError(Exception):
    """Base class for every error the agent raises."""


class StartupError(HostSyncError):
    """Fatal: the agent cannot take its first snapshot."""


class TransientReadError(HostSyncError):
    """The address set could not be read this tick."""


class MainInterfaceError(TransientReadError):
    pass


class InterfaceLookupError(TransientReadError):
    pass


class InterfaceNotFoundError(TransientReadError):
    def __init__(self, interface: str):
        super().__init__(f"Interface {interface!r} not found")
        self.interface = interface


class HostnameUnavailableError(HostSyncError):
    pass


class RenderError(HostSyncError):
    pass


class TemplateReadError(RenderError):
    pass


class TemplateRenderError(RenderError):
    pass


class WriteError(HostSyncError):
    pass
