from webspaces.services import collection_builder, webspace_loader_service, webspace_manager

__all__ = [
    "collection_builder",
    "webspace_loader_service",
    "webspace_manager",
]
