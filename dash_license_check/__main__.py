"""Allow running as ``python -m dash_license_check``."""
from dash_license_check.cli import main

if __name__ == "__main__":
    main()
