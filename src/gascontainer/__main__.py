from gascontainer.cli import main

main()
