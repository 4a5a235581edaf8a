from clige.cli.main import main

main()
