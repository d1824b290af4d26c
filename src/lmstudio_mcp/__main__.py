import sys

from lmstudio_mcp.mcp_server import main

if __name__ == "__main__":
    sys.exit(main())
