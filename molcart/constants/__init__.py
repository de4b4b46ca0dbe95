from .runtime import *  # noqa: F401,F403
