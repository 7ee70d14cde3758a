"""Infrastructure layer: filesystem, system metadata, network lookups.

This layer depends on stdlib and third-party libs (psutil, requests).
It must never import from domain, services, commands, or output.
The service layer bridges between domain transforms and infrastructure.
"""
