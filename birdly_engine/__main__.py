"""Allow ``python -m birdly_engine``."""

from birdly_engine.cli.main import main

if __name__ == "__main__":
    main()
