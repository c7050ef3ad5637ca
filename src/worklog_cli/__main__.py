from worklog_cli.main import main

main()
