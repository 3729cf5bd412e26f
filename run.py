"""Entrypoint: hands off to app.server.serve() with the environment settings."""
from app.server import serve

if __name__ == "__main__":
    serve()
