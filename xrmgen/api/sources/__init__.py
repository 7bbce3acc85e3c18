from .snapshot import MetadataSnapshot

__all__ = ["MetadataSnapshot"]
