from hello_service.cli import main

main()
