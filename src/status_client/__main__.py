from status_client.cli import main

main()
