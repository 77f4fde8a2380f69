"""Infrastructure layer — file persistence for the company snapshot.

This layer depends on stdlib and the domain layer.
It must never import from services, commands, or output.
The service layer bridges between callers and infrastructure.
"""
