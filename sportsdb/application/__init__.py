"""Application layer: DTOs, ports, search services, and use cases."""
