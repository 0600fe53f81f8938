from natural_units.cli.main import main

main()
