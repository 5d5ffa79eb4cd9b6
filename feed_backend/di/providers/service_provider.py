from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.services.asset_store import AssetStore
from ...domain.services.event_publisher import EventPublisher
from ...infrastructure.notifications import WebSocketManager, RealtimePublisher
from ...infrastructure.storage import LocalAssetStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ServiceProvider:
    """Registers process-wide services: realtime fan-out and asset storage"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = get_settings()

        websocket_manager = WebSocketManager()
        publisher = RealtimePublisher(
            transport=websocket_manager,
            max_queue_size=settings.realtime_queue_size,
        )

        container.register_singleton(WebSocketManager, websocket_manager)
        container.register_singleton(RealtimePublisher, publisher)
        # Use cases depend on the interface only
        container.register_singleton(EventPublisher, publisher)

        container.register_singleton(AssetStore, LocalAssetStore(settings.asset_upload_dir))
