"""Library metadata."""
from __future__ import annotations

__all__: list[str] = ["__author__", "__copyright__", "__email__", "__license__", "__version__"]

__author__ = "Faster Speeding"
__copyright__ = "© 2020-2022 Faster Speeding"
__email__ = "luke@lmbyrne.dev"
__license__ = "BSD"
__version__ = "0.1.0"
