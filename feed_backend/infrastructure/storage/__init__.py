from .local_asset_store import LocalAssetStore, ALLOWED_IMAGE_EXTENSIONS

__all__ = ["LocalAssetStore", "ALLOWED_IMAGE_EXTENSIONS"]
