"""DNS probing toolkit: option parsing and resume state.

``__version__`` is the single source of the release number; packaging reads
it through setuptools dynamic metadata.
"""

__version__ = "1.2.0"

__all__ = [
    "errors",
    "inputs",
    "options",
    "rcodes",
    "resume",
    "validation",
    "__version__",
]
