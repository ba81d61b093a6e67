from jj_mcp.main import main

main()
