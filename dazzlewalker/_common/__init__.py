"""Common components shared across DazzleWalker.

This internal package contains plain configuration code. It should NOT be
imported directly by users.

Important: This package must NEVER import from core to avoid
circular dependencies.
"""

from .config import (
    SerializationGroup,
    TraversalStrategy,
    WalkerConfig,
)

__all__ = [
    'SerializationGroup',
    'TraversalStrategy',
    'WalkerConfig',
]
