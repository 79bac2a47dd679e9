from template_cycle.cli.main import main

main()
