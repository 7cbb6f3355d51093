from hrtracker.cli.app import main

main()
