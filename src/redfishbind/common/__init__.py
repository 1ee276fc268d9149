# -*- coding: utf-8 -*-
"""
Entity read/write protocol shared by every resource type
"""

from .errors import (
    ResourceError,
    ResourceDecodeError,
    SnapshotDecodeError,
    ReadOnlyResourceError,
    UnboundResourceError,
    ResponseError,
    ResourceUpdateError,
)

from .collection import (
    CollectionError,
    get_collection,
)

from .entity import (
    Entity
)
