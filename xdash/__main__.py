from xdash.cli import main

main()
