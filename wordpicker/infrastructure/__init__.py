"""Infrastructure layer: HTTP routers, schemas, repositories and external clients."""
