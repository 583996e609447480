from diodesim.main import main

main()
