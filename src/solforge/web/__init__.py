"""Web boundary layer.

- contracts/: request and response models for each route
- controllers/: FastAPI routers, one per route family
- services/: collaborators that need I/O (balance lookup)

Controllers only call into solforge.operations; they hold no key material
beyond the request being served.
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
