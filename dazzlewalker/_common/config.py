"""Configuration system for DazzleWalker.

This module defines how users tune a walker tree: how deep it may expand,
how the type resolution cache is sized, and which serialization groups
are emitted by default.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set, Union


class SerializationGroup(Enum):
    """Groups understood by the tree walker normalizer.

    Each group switches on one slice of a walker's public surface.
    """
    WALKER = "walker"                    # The wrapped item
    CHILDREN = "children"                # Full nested children
    CHILDREN_COUNT = "children_count"    # childrenCount only
    PARENT = "parent"                    # Parent back-reference
    WALKER_LEVEL = "walker_level"        # level, maxLevel, index
    WALKER_METADATA = "walker_metadata"  # Metadata map


@dataclass
class WalkerConfig:
    """Complete configuration for building a walker tree.

    Passed to ``build()``. Explicit ``build()`` arguments always win over
    the values held here.
    """

    # Depth bound applied to the root walker
    max_level: Union[int, float] = math.inf

    # Type resolution cache
    cache_max_size: int = 1024
    cache_ttl: Optional[float] = None  # Seconds, None = never expires

    # Groups used by the normalizer when none are requested
    default_groups: Set[str] = field(
        default_factory=lambda: {
            SerializationGroup.WALKER.value,
            SerializationGroup.CHILDREN.value,
        }
    )

    @classmethod
    def shallow(cls, max_level: int = 1) -> 'WalkerConfig':
        """Create config expanding only the first levels.

        Args:
            max_level: How deep to expand (default 1 = root children only)

        Returns:
            WalkerConfig for shallow walking
        """
        return cls(max_level=max_level)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_level is None:
            errors.append("max_level cannot be None, use math.inf for no bound")
        elif self.max_level < 0:
            errors.append("max_level cannot be negative")
        elif not math.isinf(self.max_level) and int(self.max_level) != self.max_level:
            errors.append("max_level must be an integer or math.inf")

        if self.cache_max_size <= 0:
            errors.append("cache_max_size must be positive")

        if self.cache_ttl is not None and self.cache_ttl <= 0:
            errors.append("cache_ttl must be positive")

        known = {group.value for group in SerializationGroup}
        if (SerializationGroup.CHILDREN.value in self.default_groups
                and SerializationGroup.PARENT.value in self.default_groups):
            errors.append("default_groups cannot contain both 'children' and 'parent'")
        if not self.default_groups & known:
            errors.append("default_groups must contain at least one walker group")

        return errors


class TraversalStrategy(Enum):
    """How to walk an expanded walker tree.

    Different strategies are optimal for different use cases.
    """
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
