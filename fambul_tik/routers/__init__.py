from fambul_tik.routers import health, members, relationship_types, relationships

__all__ = [
    "health",
    "members",
    "relationship_types",
    "relationships",
]
