"""HTTP and GraphQL clients (httpx)."""
