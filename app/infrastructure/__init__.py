"""Infrastructure modules for Lingo Bot.

Centralized infrastructure components:
- configuration: Settings management
- logging: Structured logging (get_module_logger)
- cache: Translation result cache with TTL expiry
- clients: Outbound HTTP transport
- commands: Filesystem command discovery and registry
- services: Application-scoped providers (get_settings, get_http_transport)
"""
