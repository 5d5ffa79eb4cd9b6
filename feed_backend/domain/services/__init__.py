from .asset_store import AssetStore
from .event_publisher import EventPublisher

__all__ = ["AssetStore", "EventPublisher"]
