"""Entrypoint: serve the greeter on $PORT (default 3000)."""
from greeter.server import main

if __name__ == "__main__":
    main()
