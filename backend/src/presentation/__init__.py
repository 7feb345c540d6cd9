"""
Presentation Layer - HTTP interface built on FastAPI.

Routers, schemas, middleware and the application factory live here.
"""
