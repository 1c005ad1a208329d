from projects.main import main

main()
