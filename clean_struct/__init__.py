"""clean-struct -- interactive folder scaffolding for front-end projects.

Quick usage::

    from clean_struct.cli import scaffold
    from clean_struct.config import Config

    result = scaffold(Config())
"""

__version__ = "1.0.0"
