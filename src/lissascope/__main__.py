from lissascope.cli import main

main()
