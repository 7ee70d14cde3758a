from mercyctl.cli import main

main()
