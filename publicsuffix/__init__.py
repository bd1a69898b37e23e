"""Domain name parser based on the Public Suffix List (https://publicsuffix.org/).

A public suffix is one under which Internet users can directly register
names, such as "com" or "co.uk".
"""

from .core import *  # noqa: F401,F403
from .core import __all__
from .core.constants import APP_VERSION as __version__
