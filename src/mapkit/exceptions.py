class MapKitError(RuntimeError):
    """Base exception for mapkit errors."""
