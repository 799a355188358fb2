from soldeer_catalog.cli import main


main()
