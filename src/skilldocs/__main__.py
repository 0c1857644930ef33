from skilldocs import main

main()
