"""
archmodel — structural architecture models with deployment instances.

    from archmodel.core.models import Model, Location
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
