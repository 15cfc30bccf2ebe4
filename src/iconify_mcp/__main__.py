from iconify_mcp.cli import main

main()
