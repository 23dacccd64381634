from amiai.cli import main

main()
