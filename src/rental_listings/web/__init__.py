"""Web site: FastAPI app, page routes and JSON API."""
