from parash.cli import main

main()
