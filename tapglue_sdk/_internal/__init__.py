"""Internal modules for Tapglue SDK.

WARNING: These modules back ``TapglueClient`` and may change without notice.
Use the public client in application code.

Modules:
    http - Shared HTTP client configuration
    network - Route table, offline queue and network manager
    requests - Request descriptors, callbacks and request factory
    session - Current user state
"""
