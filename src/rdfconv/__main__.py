from rdfconv.cli import main

main()
