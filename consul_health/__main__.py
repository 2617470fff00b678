"""Allow ``python -m consul_health service-health ...``."""

from consul_health.main.cli import main

if __name__ == "__main__":
    main()
