"""API routers"""

from . import artifacts, config, diff, panel
