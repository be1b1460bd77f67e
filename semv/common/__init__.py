from .immutable import immutable
from .results import partition, unwrap

__all__ = ["immutable", "partition", "unwrap"]
