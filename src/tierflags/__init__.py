"""
tierflags – in-memory registry of tier-scoped feature flags.

Import path convention::

    from tierflags.flags import FlagRegistry, AllowFlag, IntMaxFlag
    from tierflags.kernel.errors import InvalidFlagError
    from tierflags.config import RegistrySettings, EnvSettingsLoader
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
