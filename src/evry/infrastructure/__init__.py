"""Infrastructure layer — tag files on disk and the system clock.

This layer depends only on stdlib.
It must never import from domain, services, commands, or output.
The service layer bridges between the decision logic and infrastructure.
"""
