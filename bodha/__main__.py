from bodha.main import main

main()
