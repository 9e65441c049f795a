"""
secret_reload – hot reload for CSI-mounted secret files.

Import path convention::

    from secret_reload.application.cache import SecretCache
    from secret_reload.application.watch import FileWatcher
    from secret_reload.application.service import SecretService
    from secret_reload.adapters.fastapi import create_app
"""

__version__ = "2.0.0"
__all__ = ["__version__"]
