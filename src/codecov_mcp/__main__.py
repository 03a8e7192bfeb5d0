"""Allow ``python -m codecov_mcp``."""

from codecov_mcp.cli import main

if __name__ == "__main__":
    main()
